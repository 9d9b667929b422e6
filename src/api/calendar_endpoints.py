"""API endpoints for Gregorian to Ethiopian date conversion."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from src.api.exceptions import BadDateRequestError
from src.calendar_systems import (
    EthiopianCalendarConverter,
    format_numeric,
    format_verbose,
)
from src.core.exceptions import DateValidationError
from src.utils.date_parser import parse_date_param
from src.utils.logging import get_logger

logger = get_logger(__name__)

# Module-level dependency variables to avoid B008 errors
query_date_dependency = Query(
    default=None, alias="date", description="Gregorian date in yyyy-mm-dd format"
)

router = APIRouter(tags=["calendar"])


class ConversionResult(BaseModel):
    """Ethiopian rendering of a Gregorian date."""

    numeric: str = Field(..., description="Ethiopian date as yyyy-mm-dd")
    verbose: str = Field(
        ..., description="Weekday, Ethiopian month name, day and year"
    )


class ErrorResponse(BaseModel):
    """Error body returned for rejected requests."""

    error: str


def build_conversion(greg_date: date) -> ConversionResult:
    """Convert a Gregorian date and render both textual forms."""
    eth_date = EthiopianCalendarConverter.to_ethiopian(greg_date)
    logger.debug(
        "date_converted",
        gregorian=greg_date.isoformat(),
        ethiopian=str(eth_date),
    )
    return ConversionResult(
        numeric=format_numeric(eth_date),
        verbose=format_verbose(greg_date, eth_date),
    )


@router.get(
    "/convert",
    response_model=ConversionResult,
    responses={400: {"model": ErrorResponse}},
)
async def convert_date(
    date_param: Optional[str] = query_date_dependency,
) -> ConversionResult:
    """
    Convert a Gregorian date to the Ethiopian calendar.

    Missing, malformed or impossible dates are rejected with a 400 response.
    """
    try:
        greg_date = parse_date_param(date_param)
    except DateValidationError as e:
        logger.info("date_rejected", date=date_param, reason=str(e))
        raise BadDateRequestError.from_validation_error(e) from e

    return build_conversion(greg_date)


@router.get("/today", response_model=ConversionResult)
async def convert_today() -> ConversionResult:
    """Convert the current system date to the Ethiopian calendar."""
    return build_conversion(date.today())
