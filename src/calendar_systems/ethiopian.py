"""Ethiopian calendar conversion implementation."""

from datetime import date, datetime
from typing import Union

from .types import EthiopianDate
from .utils import CalendarUtils


class EthiopianCalendarConverter:
    """Gregorian to Ethiopian conversion anchored on the Ethiopian New Year."""

    # Ethiopian calendar constants
    NEW_YEAR_MONTH = 9
    NEW_YEAR_DAY = 11
    DAYS_PER_MONTH = 30
    # Ethiopian year = Gregorian year - offset, depending on the New Year
    OFFSET_AFTER_NEW_YEAR = 7
    OFFSET_BEFORE_NEW_YEAR = 8

    @staticmethod
    def new_year_date(g_year: int) -> date:
        """Get the Gregorian date of Ethiopian New Year for a Gregorian year.

        Falls on September 11, or on September 12 when the preceding
        Gregorian year was a leap year.
        """
        day = EthiopianCalendarConverter.NEW_YEAR_DAY
        if CalendarUtils.is_gregorian_leap(g_year - 1):
            day += 1
        return date(g_year, EthiopianCalendarConverter.NEW_YEAR_MONTH, day)

    @staticmethod
    def earliest_supported_date() -> date:
        """First Gregorian date accepted for conversion: New Year of year 1."""
        return EthiopianCalendarConverter.new_year_date(
            1 + EthiopianCalendarConverter.OFFSET_AFTER_NEW_YEAR
        )

    @staticmethod
    def to_ethiopian(greg_date: Union[date, datetime]) -> EthiopianDate:
        """
        Convert a Gregorian date to an Ethiopian date.

        Args:
            greg_date: Gregorian date; the time of a datetime is ignored

        Returns:
            Ethiopian date. The month is not clamped to 13.

        Raises:
            ValueError: if the epoch of the date's Ethiopian year falls
                before year 1 of the Gregorian calendar
        """
        if isinstance(greg_date, datetime):
            greg_date = greg_date.date()

        g_year = greg_date.year
        new_year = EthiopianCalendarConverter.new_year_date(g_year)

        if greg_date >= new_year:
            eth_year = g_year - EthiopianCalendarConverter.OFFSET_AFTER_NEW_YEAR
            eth_new_year = new_year
        else:
            eth_year = g_year - EthiopianCalendarConverter.OFFSET_BEFORE_NEW_YEAR
            eth_new_year = EthiopianCalendarConverter.new_year_date(g_year - 1)

        diff = (greg_date - eth_new_year).days
        month, day = divmod(diff, EthiopianCalendarConverter.DAYS_PER_MONTH)

        return EthiopianDate(year=eth_year, month=month + 1, day=day + 1)
