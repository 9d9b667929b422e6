"""Calendar Systems Support.

This module converts Gregorian dates to the Ethiopian calendar and renders
the result as numeric and name-based strings.
"""

from .ethiopian import EthiopianCalendarConverter
from .formatter import (
    MONTH_NAMES,
    WEEKDAY_NAMES,
    format_numeric,
    format_verbose,
    month_name,
    weekday_name,
)
from .types import EthiopianDate
from .utils import CalendarUtils

__all__ = [
    "EthiopianDate",
    "EthiopianCalendarConverter",
    "CalendarUtils",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "format_numeric",
    "format_verbose",
    "month_name",
    "weekday_name",
]
