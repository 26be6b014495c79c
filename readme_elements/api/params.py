from datetime import date

from fastapi import Request

from readme_elements.core.palette import Palette
from readme_elements.core.palette import get_palette
from readme_elements.services.calendar_layout import parse_int_token
from readme_elements.services.calendar_layout import parse_marked_days
from readme_elements.settings import Settings


def int_or_default(raw: str | None, default: int) -> int:
    """Parse an integer query value, falling back to default when malformed."""

    if raw is None:
        return default
    try:
        return parse_int_token(raw, "integer")
    except ValueError:
        return default


def calendar_inputs(
    year: str | None,
    month: str | None,
    progress_days: str | None,
    today: date,
) -> tuple[int, int, frozenset[int]]:
    """Resolve calendar query values, defaulting to today's year, month and day.

    Raises:
        InvalidInputError: If any supplied token is not an integer.
    """

    parsed_year = today.year if year is None else parse_int_token(year, "year")
    parsed_month = today.month if month is None else parse_int_token(month, "month")
    if progress_days:
        marked_days = parse_marked_days(progress_days)
    else:
        marked_days = frozenset({today.day})
    return parsed_year, parsed_month, marked_days


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_active_palette(request: Request) -> Palette:
    return get_palette(get_settings(request).palette)
