"""
Date Parameter Parser Module.

This module turns the ``yyyy-mm-dd`` strings received by the API into
Gregorian dates, rejecting anything the Ethiopian converter cannot accept.
"""

import logging
from datetime import date
from typing import Optional

from src.calendar_systems import EthiopianCalendarConverter
from src.core.exceptions import InvalidDateError, MalformedDateError, MissingDateError

logger = logging.getLogger(__name__)

DATE_SEPARATOR = "-"


def parse_date_param(value: Optional[str]) -> date:
    """
    Parse a ``yyyy-mm-dd`` query parameter into a Gregorian date.

    Args:
        value: Raw parameter value, or None when it was not supplied

    Returns:
        The parsed date

    Raises:
        MissingDateError: value is missing or blank
        MalformedDateError: value does not have exactly three parts
        InvalidDateError: parts are not ASCII digits, do not form a real
            date, or the date precedes the New Year of Ethiopian year 1
    """
    if value is None or not value.strip():
        raise MissingDateError()

    parts = value.strip().split(DATE_SEPARATOR)
    if len(parts) != 3:
        raise MalformedDateError()

    # int() also takes signs, underscores, whitespace and non-ASCII digits
    if not all(part.isascii() and part.isdigit() for part in parts):
        logger.debug("Rejected date %r: non-digit characters", value)
        raise InvalidDateError()

    try:
        year, month, day = (int(part) for part in parts)
        parsed = date(year, month, day)
    except ValueError as e:
        logger.debug("Rejected date %r: %s", value, e)
        raise InvalidDateError() from e

    if parsed < EthiopianCalendarConverter.earliest_supported_date():
        raise InvalidDateError("Date is outside the supported range")

    return parsed
