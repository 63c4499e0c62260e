"""
Indian Public Holiday Catalog

This module answers questions like "what are the national holidays this year",
"which holidays apply to Tamil Nadu" or "how many holidays does each state
have" for the years covered by the reference tables. A catalog is built once
per year and never changes afterwards.
"""
import re
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Dict, Iterable, Optional, Tuple, Union

from loguru import logger

from bharat_holidays.config import config
from bharat_holidays.data_engine.holiday_tables import (
    NATIONAL_HOLIDAYS,
    STATES,
    iter_regional_entries,
)
from bharat_holidays.calendar_insights.holiday_formatting import format_holiday_line


class HolidayCatalogError(ValueError):
    """Base class for catalog lookup errors."""


class InvalidYear(HolidayCatalogError):
    """Raised when a catalog is requested for a year without data."""

    def __init__(self, year):
        self.year = year
        valid = "/".join(str(y) for y in config.catalog.supported_years)
        super().__init__(f"Valid years are {valid}, got {year!r}.")


class InvalidStateCode(HolidayCatalogError):
    """Raised when a state code is not one of the known two-letter codes."""

    def __init__(self, state_code):
        self.state_code = state_code
        super().__init__(f"Invalid state code [{state_code}].")


@dataclass(frozen=True, order=True)
class HolidayRecord:
    """One holiday occurrence on a real calendar date."""
    year: int
    month: int
    day: int
    description: str

    def __post_init__(self):
        # Raises ValueError for dates like 31 Feb.
        date(self.year, self.month, self.day)
        if not self.description:
            raise ValueError("Holiday description must not be empty.")

    @property
    def date(self) -> date:
        return date(self.year, self.month, self.day)

    @property
    def names(self) -> Tuple[str, ...]:
        """Alternate names of the holiday, e.g. ('Pongal', 'Makar Samkranti')."""
        return tuple(name.strip() for name in self.description.split("/"))

    def as_string(self) -> str:
        return format_holiday_line(self.year, self.month, self.day, self.description)


def _normalize_year(year: Union[int, str, None]) -> int:
    """Maps the constructor argument onto a supported year or raises InvalidYear."""
    catalog_cfg = config.catalog
    if year is None:
        return catalog_cfg.default_year

    candidate = None
    # bool is an int subclass; True/False are never years.
    if isinstance(year, int) and not isinstance(year, bool):
        candidate = year
    elif isinstance(year, str) and re.fullmatch(r"\d{4}", year.strip(), re.ASCII):
        candidate = int(year.strip())

    if candidate not in catalog_cfg.supported_years:
        logger.error(f"Rejected catalog year {year!r}")
        raise InvalidYear(year)
    return candidate


def _check_state_code(state_code: str) -> str:
    if not isinstance(state_code, str) or state_code not in STATES:
        logger.error(f"Rejected state code {state_code!r}")
        raise InvalidStateCode(state_code)
    return state_code


class HolidayCatalog:
    """
    National, regional and per-state holidays for one supported year.

    Usage:
        catalog = HolidayCatalog(2011)
        print(catalog.get(catalog.get_state_holidays('TN')))
    """

    def __init__(self, year: Union[int, str, None] = None):
        self._year = _normalize_year(year)
        self._national_holidays = self._build_national_holidays(self._year)
        self._regional_holidays = self._build_regional_holidays(self._year)
        self._state_holidays = self._build_state_holidays(self._year)
        self._holiday_counts = MappingProxyType({
            code: len(records) for code, records in self._state_holidays.items()
        })
        logger.debug(
            f"Built holiday catalog for {self._year}: "
            f"{len(self._national_holidays)} national, "
            f"{len(self._regional_holidays)} regional, "
            f"{len(self._state_holidays)} states"
        )

    def __repr__(self):
        return f"{type(self).__name__}(year={self._year})"

    # --- Construction helpers ---

    @staticmethod
    def _build_national_holidays(year: int) -> Tuple[HolidayRecord, ...]:
        return tuple(
            HolidayRecord(year, month, day, desc) for month, day, desc in NATIONAL_HOLIDAYS
        )

    @staticmethod
    def _build_regional_holidays(year: int) -> Tuple[HolidayRecord, ...]:
        return tuple(
            HolidayRecord(year, month, day, desc)
            for month, day, desc, _ in iter_regional_entries(year)
        )

    @staticmethod
    def _build_state_holidays(year: int) -> MappingProxyType:
        state_holidays: Dict[str, list] = {}
        for month, day, desc, states in iter_regional_entries(year):
            record = HolidayRecord(year, month, day, desc)
            # A code repeated in one day's list still means a single holiday.
            for code in dict.fromkeys(states):
                state_holidays.setdefault(code, []).append(record)
        return MappingProxyType({
            code: tuple(records) for code, records in state_holidays.items()
        })

    # --- Accessors ---

    @property
    def year(self) -> int:
        return self._year

    @staticmethod
    def supported_years() -> Tuple[int, ...]:
        return tuple(config.catalog.supported_years)

    @staticmethod
    def state_codes() -> Tuple[str, ...]:
        return tuple(sorted(STATES))

    def get_national_holidays(self) -> Tuple[HolidayRecord, ...]:
        """Returns the national holidays in declaration order (Jan 26, Aug 15, Oct 2)."""
        return self._national_holidays

    def get_regional_holidays(self) -> Tuple[HolidayRecord, ...]:
        """Returns the regional holidays sorted by (month, day)."""
        return self._regional_holidays

    def get_state_holidays(self, state_code: str) -> Tuple[HolidayRecord, ...]:
        """
        Returns the holidays observed in one state, in calendar order.

        Args:
            state_code (str): Two-letter state code, e.g. 'TN'.

        Returns:
            tuple: HolidayRecord entries; empty if the state has none this year.

        Raises:
            InvalidStateCode: If the code is unknown.
        """
        _check_state_code(state_code)
        return self._state_holidays.get(state_code, ())

    def get_holiday_counts(self) -> MappingProxyType:
        """Returns state code -> number of holidays, for states with at least one."""
        return self._holiday_counts

    def get_holidays_table(self) -> str:
        """Returns one '<State Name>: <count>' line per state, ordered by state code."""
        return "".join(
            f"{STATES[code]}: {count}\n"
            for code, count in sorted(self._holiday_counts.items())
        )

    def get_state_name(self, state_code: str) -> str:
        """Returns the full name for a two-letter state code."""
        return STATES[_check_state_code(state_code)]

    def holidays_on(self, day: date) -> Tuple[HolidayRecord, ...]:
        """Returns every national and regional holiday falling on the given date."""
        return tuple(
            record
            for record in self._national_holidays + self._regional_holidays
            if record.date == day
        )

    def is_holiday(self, day: date, state_code: Optional[str] = None) -> bool:
        """
        Checks if a given date is a holiday.

        Args:
            day (datetime.date): The date to check.
            state_code (str, optional): Restrict regional holidays to this state.
                Without it, a regional holiday anywhere counts.

        Returns:
            bool: True if the date is a national holiday or a matching regional one.
        """
        if state_code is not None:
            _check_state_code(state_code)

        # 1. National holidays apply everywhere
        if any(record.date == day for record in self._national_holidays):
            return True

        # 2. Regional holidays, optionally narrowed to one state
        if state_code is None:
            candidates = self._regional_holidays
        else:
            candidates = self._state_holidays.get(state_code, ())
        return any(record.date == day for record in candidates)

    # --- Display ---

    def get(self, records: Iterable[HolidayRecord]) -> str:
        """Renders the given records one per line, in the order given."""
        return "".join(record.as_string() for record in records)

    def as_string(self) -> str:
        """Renders national holidays, a separator, regional holidays and a closing separator."""
        separator = config.catalog.separator + "\n"
        return (
            self.get(self._national_holidays)
            + separator
            + self.get(self._regional_holidays)
            + separator
        )

# --- Self-Test Block ---
if __name__ == '__main__':
    from bharat_holidays.config import setup_logging

    setup_logging()
    catalog = HolidayCatalog(2011)
    print(catalog.as_string())
    print(f"Holidays in {catalog.get_state_name('TN')}:")
    print(catalog.get(catalog.get_state_holidays('TN')))
    print(catalog.get_holidays_table())
