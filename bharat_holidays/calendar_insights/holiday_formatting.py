"""
Holiday Display Formatting

Renders holiday records as single human-readable lines such as
"Wed, 15 Aug 2012, Independence Day.".
"""
from datetime import date

# Index 0 is unused so ISO weekdays (Mon=1) and month numbers index directly.
MONTHS = (None, 'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
          'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')
WEEKDAYS = (None, 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')

def day_of_week(year: int, month: int, day: int) -> int:
    """
    Returns the ISO weekday of a Gregorian date.

    Args:
        year (int): Four digit year.
        month (int): Month, 1-12.
        day (int): Day of the month.

    Returns:
        int: 1 for Monday through 7 for Sunday.
    """
    return date(year, month, day).isoweekday()

def format_holiday_line(year: int, month: int, day: int, description: str) -> str:
    """Formats one holiday as '<Wkd>, <DD> <Mon> <YYYY>, <description>.' plus newline."""
    weekday = WEEKDAYS[day_of_week(year, month, day)]
    return f"{weekday}, {day:02d} {MONTHS[month]} {year:04d}, {description}.\n"
