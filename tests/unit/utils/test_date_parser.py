"""Test parsing of the date query parameter."""

from datetime import date

import pytest

from src.core.exceptions import (
    DateValidationError,
    InvalidDateError,
    MalformedDateError,
    MissingDateError,
)
from src.utils.date_parser import parse_date_param


class TestParseDateParam:
    """Test accepted and rejected date strings."""

    def test_iso_date(self):
        """A well formed date is parsed."""
        assert parse_date_param("2023-09-11") == date(2023, 9, 11)

    def test_unpadded_parts(self):
        """Month and day need no zero padding."""
        assert parse_date_param("2023-9-1") == date(2023, 9, 1)

    def test_surrounding_whitespace(self):
        """Whitespace around the value is ignored."""
        assert parse_date_param(" 2000-09-12 ") == date(2000, 9, 12)

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing(self, value):
        """Missing values are reported as such."""
        with pytest.raises(MissingDateError, match="Missing date parameter"):
            parse_date_param(value)

    @pytest.mark.parametrize("value", ["2023-09", "2023/09/11", "2023-09-11-01", "20230911"])
    def test_wrong_number_of_parts(self, value):
        """Values without exactly three parts are malformed."""
        with pytest.raises(MalformedDateError, match="yyyy-mm-dd format"):
            parse_date_param(value)

    @pytest.mark.parametrize(
        "value", ["abcd-01-01", "2023-xx-01", "2023--01", "2023-13-01", "2023-02-30", "0-01-01"]
    )
    def test_invalid_date(self, value):
        """Non numeric parts and impossible dates are invalid."""
        with pytest.raises(InvalidDateError, match="Invalid date provided"):
            parse_date_param(value)

    def test_leap_day(self):
        """February 29 is accepted in leap years only."""
        assert parse_date_param("2024-02-29") == date(2024, 2, 29)
        with pytest.raises(InvalidDateError):
            parse_date_param("2023-02-29")

    @pytest.mark.parametrize("value", ["0001-09-11", "0001-09-12", "0008-09-10"])
    def test_before_supported_range(self, value):
        """Dates before the New Year of Ethiopian year 1 are rejected."""
        with pytest.raises(InvalidDateError, match="outside the supported range"):
            parse_date_param(value)

    def test_first_supported_date(self):
        """The New Year of Ethiopian year 1 is accepted."""
        assert parse_date_param("0008-09-11") == date(8, 9, 11)

    @pytest.mark.parametrize(
        "value",
        ["2023-0_9-1_1", "2023-+9- 11", "+2023-09-11", "2023-09-1 1", "٢٠٢٣-09-11"],
    )
    def test_only_ascii_digits(self, value):
        """Parts that int() would accept but are not plain digits are invalid."""
        with pytest.raises(InvalidDateError, match="Invalid date provided"):
            parse_date_param(value)

    def test_errors_share_base_class(self):
        """All rejections derive from DateValidationError."""
        for value in (None, "2023", "2023-02-30"):
            with pytest.raises(DateValidationError):
                parse_date_param(value)
