"""Calendar utility functions."""

import calendar


class CalendarUtils:
    """Utility functions for calendar operations."""

    @staticmethod
    def is_gregorian_leap(year: int) -> bool:
        """Check if a year is a leap year in the proleptic Gregorian calendar.

        Defined for every integer, including year 0 and negative years.
        """
        return calendar.isleap(year)
