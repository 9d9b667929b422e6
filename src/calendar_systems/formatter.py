"""Textual rendering of Ethiopian dates."""

from datetime import date
from typing import Tuple

from .types import EthiopianDate

# Weekday names, Sunday first
WEEKDAY_NAMES: Tuple[str, ...] = (
    "እሁድ",
    "ሰኞ",
    "ማክሰኞ",
    "እሮብ",
    "ሓሙስ",
    "አርብ",
    "ቅዳሜ",
)

MONTH_NAMES: Tuple[str, ...] = (
    "መስከረም",  # Meskerem
    "ጥቅምት",  # Tikimt
    "ኅዳር",  # Hidar
    "ታህሳስ",  # Tahsas
    "ጥር",  # Tir
    "የካቲት",  # Yekatit
    "መጋቢት",  # Megabit
    "ሚያዝያ",  # Miyazya
    "ግንቦት",  # Ginbot
    "ሰኔ",  # Sene
    "ሐምሌ",  # Hamle
    "ነሐሴ",  # Nehase
    "ጳጉሜ",  # Pagume
)

UNKNOWN_MONTH = "Unknown"


def month_name(month: int) -> str:
    """Return the name of a 1-based Ethiopian month, or "Unknown"."""
    index = month - 1
    if 0 <= index < len(MONTH_NAMES):
        return MONTH_NAMES[index]
    return UNKNOWN_MONTH


def weekday_name(greg_date: date) -> str:
    """Return the weekday name of a Gregorian date."""
    # isoweekday: Monday=1 .. Sunday=7
    return WEEKDAY_NAMES[greg_date.isoweekday() % 7]


def format_numeric(eth_date: EthiopianDate) -> str:
    """Format an Ethiopian date as yyyy-mm-dd."""
    return f"{eth_date.year}-{eth_date.month:02d}-{eth_date.day:02d}"


def format_verbose(greg_date: date, eth_date: EthiopianDate) -> str:
    """
    Format an Ethiopian date with its month name and weekday.

    The weekday comes from the Gregorian date since both calendars share
    the weekly cycle.
    """
    return (
        f"{weekday_name(greg_date)}, {month_name(eth_date.month)} "
        f"{eth_date.day:02d}, {eth_date.year}"
    )
