"""
Indian Holiday Reference Tables

This module holds the hand-curated holiday data used by the catalog: the
state/union-territory code map, the fixed national holidays and the regional
holidays for each supported year. Every table is read-only once the module is
imported.

Source: http://www.qppstudio.net/publicholidays2011/india.htm and
http://www.qppstudio.net/publicholidays2012/india.htm
(the 2012 table only covers January to March).
"""
from types import MappingProxyType

# Two-letter state code -> canonical state/union-territory name.
STATES = MappingProxyType({
    'AN': 'Andaman/Nicobar',
    'AP': 'Andhra Pradesh',
    'AR': 'Arunachal Pradesh',
    'AS': 'Assam',
    'BR': 'Bihar',
    'CG': 'Chattisgarh',
    'CH': 'Chandigarh',
    'DD': 'Daman/Diu',
    'DL': 'Delhi',
    'DN': 'Dadra and Nagar Haveli',
    'GA': 'Goa',
    'GJ': 'Gujrat',
    'HP': 'Himachal Pradesh',
    'HR': 'Haryana',
    'JH': 'Jharkhand',
    'JK': 'Jammu/Kashmir',
    'KA': 'Karnataka',
    'KL': 'Kerala',
    'LD': 'Lakshadweep',
    'MH': 'Maharashtra',
    'ML': 'Meghalaya',
    'MN': 'Manipur',
    'MP': 'Madhya Pradesh',
    'MZ': 'Mizoram',
    'NL': 'Nagaland',
    'OR': 'Orissa',
    'PB': 'Punjab',
    'PY': 'Puducherry',
    'RJ': 'Rajasthan',
    'SK': 'Sikkim',
    'TN': 'Tamil Nadu',
    'TR': 'Tripura',
    'UK': 'Uttarakhand',
    'UP': 'Uttar Pradesh',
    'WB': 'West Bengal',
})

# (month, day, description) in declaration order, same for every year.
NATIONAL_HOLIDAYS = (
    (1, 26, "Republic Day"),
    (8, 15, "Independence Day"),
    (10, 2, "Mahatma Gandhi's Birthday"),
)

# Codes observing a holiday everywhere the bank calendar applies.
_ALL_STATES = tuple(STATES)


def _entry(desc, *states):
    """Builds one read-only regional entry."""
    return MappingProxyType({"desc": desc, "states": tuple(states)})


def _freeze(table):
    """Wraps a month -> day -> entry table in read-only mappings."""
    return MappingProxyType({
        month: MappingProxyType(days) for month, days in table.items()
    })


# --- 2012 Holidays (January to March) ---
_HOLIDAYS_2012 = _freeze({
    1: {
        1: _entry("New Year's Day", 'AR', 'ML', 'MN', 'MZ', 'PY', 'SK', 'TN'),
        5: _entry("Guru Govind Singh Jayanti", 'CH', 'HP', 'HR', 'PB'),
        14: _entry("Bhogi", 'AP'),
        # 'AN' is listed twice in the source list.
        15: _entry("Pongal/Makar Samkranti",
                   'AN', 'AN', 'AR', 'AS', 'GJ', 'KA', 'PY', 'TN'),
        16: _entry("Thiruvalluvar Day", 'PY', 'TN'),
        17: _entry("Uzhavar Thirunal", 'TN'),
        23: _entry("Netaji Subhash Chandra Bose Jayanti", 'TR', 'WB'),
        28: _entry("Vasanta Panchami/Shree Panchami", 'HR', 'OR', 'TR', 'WB'),
    },
    2: {
        5: _entry("Milad-un-Nabi (Prophet Mohammad (pbuh) Birthday)",
                  'AN', 'AP', 'CH', 'DL', 'KA', 'KL', 'MH', 'MP', 'MZ', 'PY',
                  'TN', 'UK', 'UP'),
        7: _entry("Guru Ravidas Jayanti", 'CH', 'HR', 'PB'),
        19: _entry("Chatrapati Shivaji Maharaj Jayanti", 'MH'),
        20: _entry("Maha Shivratri",
                   'AP', 'CG', 'CH', 'GJ', 'HP', 'HR', 'JK', 'KA', 'KL', 'MH',
                   'MP', 'OR', 'UK', 'UP'),
    },
    3: {
        7: _entry("Doljatra/Holika Dahan",
                  'AP', 'AS', 'ML', 'MN', 'PB', 'UP', 'WB'),
        8: _entry("Holi",
                  'AN', 'AR', 'BR', 'CG', 'CH', 'DD', 'DL', 'DN', 'GA', 'GJ',
                  'HP', 'JH', 'JK', 'KL', 'LD', 'MH', 'MP', 'MZ', 'NL', 'OR',
                  'RJ', 'SK', 'UK', 'UP'),
        15: _entry("Kashiramji Jayanti", 'UP'),
        22: _entry("Gudi Padva/Ugadi/Chetti Chand/Telugu New Year",
                   'AP', 'GA', 'KA', 'MH', 'UP', 'PY', 'TN'),
        31: _entry("Ram Navami",
                   'BR', 'CH', 'DL', 'MH', 'MP', 'OR', 'PB', 'RJ', 'SK', 'UK',
                   'UP', 'AP', 'GJ', 'HR'),
    },
})

# --- 2011 Holidays ---
_HOLIDAYS_2011 = _freeze({
    1: {
        1: _entry("New Year's Day", 'AR', 'ML', 'MN', 'MZ', 'PY', 'SK', 'TN'),
        5: _entry("Guru Govind Singh Jayanti", 'CH', 'HP', 'HR', 'PB'),
        14: _entry("Bhogi", 'AP'),
        # 'AN' is listed twice in the source list.
        15: _entry("Pongal/Makar Samkranti",
                   'AN', 'AN', 'AR', 'AS', 'GJ', 'KA', 'PY', 'TN'),
        16: _entry("Thiruvalluvar Day", 'PY', 'TN'),
        17: _entry("Uzhavar Thirunal", 'TN'),
        23: _entry("Netaji Subhash Chandra Bose Jayanti", 'TR', 'WB'),
    },
    2: {
        8: _entry("Vasanta Panchami/Shree Panchami", 'HR', 'OR', 'TR', 'WB'),
        16: _entry("Milad-un-Nabi (Prophet Mohammad (pbuh) Birthday)",
                   'AN', 'AP', 'CH', 'DL', 'KA', 'KL', 'MH', 'MP', 'MZ', 'PY',
                   'TN', 'UK', 'UP'),
        18: _entry("Guru Ravidas Jayanti", 'CH', 'HR', 'PB'),
        19: _entry("Chatrapati Shivaji Maharaj Jayanti", 'MH'),
    },
    3: {
        2: _entry("Maha Shivratri",
                  'AP', 'CG', 'CH', 'GJ', 'HP', 'HR', 'JK', 'KA', 'KL', 'MH',
                  'MP', 'OR', 'UK', 'UP'),
        15: _entry("Kashiramji Jayanti", 'UP'),
        19: _entry("Doljatra/Holika Dahan",
                   'AP', 'AS', 'ML', 'MN', 'PB', 'UP', 'WB'),
        20: _entry("Holi",
                   'AN', 'AR', 'BR', 'CG', 'CH', 'DD', 'DL', 'DN', 'GA', 'GJ',
                   'HP', 'JH', 'JK', 'KL', 'LD', 'MH', 'MP', 'MZ', 'NL', 'OR',
                   'RJ', 'SK', 'UK', 'UP'),
        23: _entry("Shahidi Divas", 'HR'),
    },
    4: {
        1: _entry("Annual Accounts Closing (Bank Holiday)", *_ALL_STATES),
        4: _entry("Gudi Padva/Ugadi/Chetti Chand/Telugu New Year",
                  'AP', 'GA', 'KA', 'MH', 'UP', 'PY', 'TN'),
        # Known data quirk: the source table declares day 5 twice with the same
        # content. Only the effective (last) entry is kept; confirm with the
        # dataset owner before adding anything here.
        5: _entry("Babu Jagjivan Ram's Birthday", 'AP'),
        12: _entry("Ram Navami",
                   'BR', 'CH', 'DL', 'MH', 'MP', 'OR', 'PB', 'RJ', 'SK', 'UK',
                   'UP', 'AP', 'GJ', 'HR'),
        14: _entry("Dr. Ambedkar Jayanti/Tamil New Year/Vishu",
                   'AP', 'BR', 'CH', 'GJ', 'HR', 'JK', 'KA', 'KL', 'MH', 'OR',
                   'PY', 'TN', 'UK', 'UP'),
        15: _entry("Bengali New Year/Vaisakh/Masadi", 'TR', 'WB'),
        16: _entry("Mahavir Jayanti",
                   'AN', 'CG', 'DL', 'HP', 'KA', 'MH', 'MP', 'RJ', 'TN', 'UK',
                   'UP'),
        22: _entry("Good Friday",
                   'AN', 'AP', 'AR', 'AS', 'BR', 'CH', 'DD', 'DL', 'DN', 'GA',
                   'JH', 'KA', 'KL', 'LD', 'MH', 'ML', 'MN', 'MP', 'MZ', 'NL',
                   'PY', 'SK', 'TN', 'UK', 'UP', 'WB'),
    },
    5: {
        1: _entry("May Day/Maharashtra Day",
                  'AP', 'AS', 'BR', 'GA', 'KA', 'KL', 'MN', 'MH', 'PY', 'TN',
                  'TR', 'WB'),
        5: _entry("Maharishi Parsuram Jayanti", 'HR', 'UP'),
        6: _entry("Basava Jayanti", 'KA'),
        17: _entry("Buddha Purnima",
                   'AN', 'AR', 'CG', 'DL', 'HP', 'JK', 'MH', 'MP', 'MZ', 'UK',
                   'UP'),
    },
    6: {
        15: _entry("Sant Kabir Jayanti", 'HR'),
        16: _entry("Hazrat Ali Birthday/Martydom Day of Sri Guru Arjun Dev Ji",
                   'UP', 'PB'),
    },
    8: {
        2: _entry("Teej", 'HR'),
        13: _entry("Raksha Bandhan", 'GJ', 'RJ', 'UK', 'UP'),
        19: _entry("Parsi New Year", 'MH'),
        21: _entry("Janmashtami (Smaria)", 'BR', 'OR', 'TN'),
        22: _entry("Janmashtami (Vaishnava)",
                   'CH', 'DL', 'GJ', 'HR', 'JK', 'PB', 'RJ', 'UK', 'UP'),
        23: _entry("Sri Krishna Ashtami", 'AP'),
        26: _entry("Jumat-ul-Wida", 'JK', 'UK', 'UP'),
        31: _entry("Idul Fitr",
                   'AN', 'AP', 'AR', 'AS', 'BR', 'CG', 'CH', 'DD', 'DL', 'DN',
                   'GJ', 'HP', 'HR', 'JK', 'KA', 'MH', 'ML', 'MN', 'MP', 'MZ',
                   'NL', 'OR', 'PB', 'PY', 'RJ', 'SK', 'TN', 'TR', 'UK', 'WB'),
    },
    9: {
        1: _entry("Ganesh Chaturthi/Vinayak Chaturthi",
                  'AP', 'GA', 'GJ', 'MH', 'OR', 'PY', 'TN'),
        8: _entry("First Oname", 'KL'),
        9: _entry("Onam/Thiruonam", 'KL', 'PY'),
        21: _entry("Sree Narayana Guru Samadhi Divas", 'KL'),
        23: _entry("Haryana Veer and Shahidi Divas", 'HR'),
        27: _entry("Mahalaya", 'KA', 'WB'),
        28: _entry("Maharaja Agrasen Jayanthi", 'HR'),
        30: _entry("Mid-Year Accounts Closing (Bank Holiday)", *_ALL_STATES),
    },
    10: {
        3: _entry("Dussehra (Maha Saptami)", 'SK', 'TR', 'WB'),
        4: _entry("Dussehra (Maha Ashtami)",
                  'AP', 'AR', 'AS', 'ML', 'MN', 'OR', 'TR', 'WB'),
        5: _entry("Dussehra (Maha Navami)",
                  'BR', 'KA', 'KL', 'ML', 'NL', 'PY', 'SK', 'TN', 'UK', 'UP',
                  'WB'),
        6: _entry("Dussehra (Vijay Dashami)",
                  'AN', 'AP', 'AS', 'BR', 'CG', 'CH', 'DD', 'DL', 'DN', 'GA',
                  'GJ', 'HP', 'HR', 'JK', 'KL', 'LD', 'MH', 'ML', 'MP', 'MZ',
                  'NL', 'OR', 'RJ', 'TN', 'TR', 'UK', 'UP', 'WB'),
        11: _entry("Lakshmi Puja/Birthday of Maharishi Valmiki Ji",
                   'HR', 'KA', 'PB', 'TR', 'WB'),
        25: _entry("Naraka Chaturdashi", 'KA'),
        26: _entry("Diwali",
                   'AN', 'AP', 'AR', 'AS', 'BR', 'CG', 'CH', 'DD', 'DL', 'DN',
                   'GA', 'GJ', 'HP', 'HR', 'JH', 'JK', 'KL', 'LD', 'MH', 'ML',
                   'MP', 'MZ', 'NL', 'OR', 'PB', 'PY', 'RJ', 'SK', 'TN', 'TR',
                   'UK', 'UP', 'WB'),
        27: _entry("Balipadyami Diwali", 'GJ', 'HR', 'KA', 'MH', 'UK', 'UP'),
        28: _entry("Bhai Duj/Chitragupta Jayanti", 'MH', 'UK', 'UP'),
    },
    11: {
        1: _entry("Kannada Rajyothsava/Haryana Day", 'KA', 'HR'),
        7: _entry("Idul Zuha",
                  'AN', 'AP', 'AR', 'AS', 'BR', 'CG', 'DD', 'DL', 'DN', 'GJ',
                  'HR', 'JH', 'JK', 'KA', 'KL', 'LD', 'MH', 'ML', 'MN', 'MP',
                  'NL', 'OR', 'PY', 'RJ', 'TN', 'TR', 'UK', 'UP', 'WB'),
        10: _entry("Guru Nanak Jayanti",
                   'AN', 'CG', 'CH', 'DL', 'HP', 'HR', 'JK', 'MH', 'MP', 'NL',
                   'PB', 'RJ', 'UK', 'UP', 'WB'),
        14: _entry("Kanaka Jayanti", 'KA'),
    },
    12: {
        6: _entry("Muharram",
                  'AN', 'AP', 'BR', 'CG', 'CH', 'DL', 'HP', 'JK', 'KA', 'MH',
                  'MP', 'OR', 'RJ', 'TN', 'UK', 'UP', 'WB'),
        25: _entry("Christmas Day",
                   'AN', 'AP', 'AR', 'AS', 'BR', 'CG', 'CH', 'DD', 'DL', 'DN',
                   'GA', 'GJ', 'HP', 'JK', 'KA', 'KL', 'LD', 'MH', 'ML', 'MN',
                   'MP', 'MZ', 'NL', 'OR', 'PB', 'PY', 'RJ', 'SK', 'TN', 'TR',
                   'UK', 'UP', 'WB'),
    },
})

# Year -> month -> day -> {"desc": str, "states": tuple of codes}
REGIONAL_HOLIDAYS = MappingProxyType({
    2011: _HOLIDAYS_2011,
    2012: _HOLIDAYS_2012,
})


def iter_regional_entries(year: int):
    """
    Yields the regional entries of a year in ascending (month, day) order.

    Args:
        year (int): A year present in REGIONAL_HOLIDAYS.

    Yields:
        tuple: (month, day, description, states) with states as given in the source.
    """
    table = REGIONAL_HOLIDAYS[year]
    for month in sorted(table):
        for day in sorted(table[month]):
            entry = table[month][day]
            yield month, day, entry["desc"], entry["states"]
