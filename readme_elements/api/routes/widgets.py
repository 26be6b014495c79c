import logging
from datetime import date

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Query
from fastapi import Response

from readme_elements.api.params import calendar_inputs
from readme_elements.api.params import get_active_palette
from readme_elements.api.params import get_settings
from readme_elements.api.params import int_or_default
from readme_elements.core.palette import Palette
from readme_elements.services import bar_layout
from readme_elements.services import gauge_layout
from readme_elements.services import ring_layout
from readme_elements.services import waffle_layout
from readme_elements.services.calendar_layout import InvalidInputError
from readme_elements.services.calendar_layout import InvalidMonthError
from readme_elements.services.render import render_calendar
from readme_elements.services.render import render_gauge
from readme_elements.services.render import render_linear_bar
from readme_elements.services.render import render_ring
from readme_elements.services.render import render_waffle
from readme_elements.settings import Settings
from readme_elements.svg.shapes import SVG_MEDIA_TYPE


logger = logging.getLogger(__name__)

router = APIRouter()


def svg_response(markup: str) -> Response:
    return Response(content=markup, media_type=SVG_MEDIA_TYPE)


@router.get("/calendar")
def get_calendar(
    year: str | None = Query(default=None),
    month: str | None = Query(default=None),
    progress_days: str | None = Query(default=None, alias="progressDays"),
    app_settings: Settings = Depends(get_settings),
    palette: Palette = Depends(get_active_palette),
) -> Response:
    """Render a month calendar with progress days highlighted."""

    try:
        parsed_year, parsed_month, marked_days = calendar_inputs(
            year, month, progress_days, today=date.today()
        )
        markup = render_calendar(
            parsed_year,
            parsed_month,
            marked_days,
            palette=palette,
            navigation=app_settings.calendar_navigation,
        )
    except (InvalidInputError, InvalidMonthError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    logger.debug(
        "Calendar rendered year=%s month=%s marked=%s",
        parsed_year,
        parsed_month,
        sorted(marked_days),
    )
    return svg_response(markup)


@router.get("/progress/bar")
@router.get("/bar", include_in_schema=False)
def get_progress_bar(
    width: str | None = None,
    height: str | None = None,
    percentage: str | None = None,
    palette: Palette = Depends(get_active_palette),
) -> Response:
    """Render a rectangular progress bar."""

    return svg_response(
        render_linear_bar(
            int_or_default(width, bar_layout.DEFAULT_WIDTH),
            int_or_default(height, bar_layout.DEFAULT_HEIGHT),
            int_or_default(percentage, 0),
            palette=palette,
        )
    )


@router.get("/progress/circle")
@router.get("/circle", include_in_schema=False)
def get_progress_circle(
    size: str | None = None,
    percentage: str | None = None,
    app_settings: Settings = Depends(get_settings),
    palette: Palette = Depends(get_active_palette),
) -> Response:
    """Render a circular progress ring."""

    return svg_response(
        render_ring(
            int_or_default(size, ring_layout.DEFAULT_SIZE),
            int_or_default(percentage, 0),
            palette=palette,
            pi=app_settings.ring_pi,
        )
    )


@router.get("/progress/gauge")
def get_progress_gauge(
    width: str | None = None,
    percentage: str | None = None,
    palette: Palette = Depends(get_active_palette),
) -> Response:
    """Render a half-dial gauge."""

    return svg_response(
        render_gauge(
            int_or_default(width, gauge_layout.DEFAULT_WIDTH),
            int_or_default(percentage, 0),
            palette=palette,
        )
    )


@router.get("/progress/waffle")
def get_progress_waffle(
    width: str | None = None,
    number_of_squares: str | None = Query(default=None, alias="numberOfSquares"),
    percentage: str | None = None,
    palette: Palette = Depends(get_active_palette),
) -> Response:
    """Render a waffle progress grid."""

    return svg_response(
        render_waffle(
            int_or_default(width, waffle_layout.DEFAULT_WIDTH),
            int_or_default(number_of_squares, waffle_layout.DEFAULT_SQUARE_COUNT),
            int_or_default(percentage, 0),
            palette=palette,
        )
    )
