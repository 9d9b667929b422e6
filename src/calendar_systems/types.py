"""Calendar system types and data classes."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class EthiopianDate:
    """Represents a date in the Ethiopian calendar.

    Months 1-12 have 30 days and month 13 (Pagume) is the short final month.
    Values are stored as computed; no clamping is applied on construction.
    """

    year: int
    month: int
    day: int

    @property
    def is_pagume(self) -> bool:
        """Whether the date falls in the 13th month."""
        return self.month == 13

    def to_tuple(self) -> Tuple[int, int, int]:
        """Return the (year, month, day) triple."""
        return self.year, self.month, self.day

    def __str__(self) -> str:
        """Return string representation of the date."""
        return f"{self.year}-{self.month:02d}-{self.day:02d}"
