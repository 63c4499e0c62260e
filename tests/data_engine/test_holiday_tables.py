import pytest
from datetime import date

from bharat_holidays.data_engine.holiday_tables import (
    NATIONAL_HOLIDAYS,
    REGIONAL_HOLIDAYS,
    STATES,
    iter_regional_entries,
)


class TestStates:

    def test_thirty_five_two_letter_codes(self):
        assert len(STATES) == 35
        assert all(len(code) == 2 and code.isupper() for code in STATES)

    @pytest.mark.parametrize(
        "code, name",
        [('WB', 'West Bengal'), ('TN', 'Tamil Nadu'), ('AN', 'Andaman/Nicobar'), ('UK', 'Uttarakhand')],
    )
    def test_known_names(self, code, name):
        assert STATES[code] == name

    def test_read_only(self):
        with pytest.raises(TypeError):
            STATES['XX'] = 'Nowhere'


class TestRegionalTables:

    def test_supported_years(self):
        assert sorted(REGIONAL_HOLIDAYS) == [2011, 2012]

    def test_2012_covers_january_to_march(self):
        assert sorted(REGIONAL_HOLIDAYS[2012]) == [1, 2, 3]

    @pytest.mark.parametrize("year", [2011, 2012])
    def test_entries_are_real_dates_with_known_states(self, year):
        for month, day, desc, states in iter_regional_entries(year):
            date(year, month, day)
            assert desc
            assert states
            assert set(states) <= set(STATES)

    @pytest.mark.parametrize("year", [2011, 2012])
    def test_iteration_is_numerically_sorted(self, year):
        keys = [(month, day) for month, day, _, _ in iter_regional_entries(year)]
        assert keys == sorted(keys)
        assert len(keys) == len(set(keys))

    def test_source_duplicates_preserved_in_literal(self):
        assert REGIONAL_HOLIDAYS[2011][1][15]["states"].count('AN') == 2
        assert REGIONAL_HOLIDAYS[2012][1][15]["states"].count('AN') == 2

    def test_bank_closing_days_cover_every_state(self):
        assert set(REGIONAL_HOLIDAYS[2011][4][1]["states"]) == set(STATES)
        assert set(REGIONAL_HOLIDAYS[2011][9][30]["states"]) == set(STATES)

    def test_read_only(self):
        with pytest.raises(TypeError):
            REGIONAL_HOLIDAYS[2011][1][2] = {}


def test_national_holidays():
    assert NATIONAL_HOLIDAYS == (
        (1, 26, "Republic Day"),
        (8, 15, "Independence Day"),
        (10, 2, "Mahatma Gandhi's Birthday"),
    )
