from collections.abc import Iterable

from readme_elements.core.palette import LEGACY_PI
from readme_elements.core.palette import Palette
from readme_elements.core.palette import STANDARD_PALETTE
from readme_elements.services.bar_layout import layout_linear_bar
from readme_elements.services.bar_layout import linear_bar_document
from readme_elements.services.calendar_layout import calendar_document
from readme_elements.services.calendar_layout import layout_calendar
from readme_elements.services.gauge_layout import gauge_document
from readme_elements.services.gauge_layout import layout_gauge
from readme_elements.services.ring_layout import layout_ring
from readme_elements.services.ring_layout import ring_document
from readme_elements.services.waffle_layout import layout_waffle
from readme_elements.services.waffle_layout import waffle_document
from readme_elements.svg.serializer import serialize_svg


def render_calendar(
    year: int,
    month: int,
    marked_days: Iterable[int],
    palette: Palette = STANDARD_PALETTE,
    navigation: bool = False,
) -> str:
    """Render a month calendar with the marked days highlighted.

    Raises:
        InvalidMonthError: If month is outside 1..12.
    """

    layout = layout_calendar(year, month, marked_days)
    return serialize_svg(calendar_document(layout, palette, navigation=navigation))


def render_linear_bar(
    width: int, height: int, percentage: int, palette: Palette = STANDARD_PALETTE
) -> str:
    """Render a horizontal progress bar."""

    layout = layout_linear_bar(width, height, percentage)
    return serialize_svg(linear_bar_document(layout, palette))


def render_ring(
    size: int,
    percentage: int,
    palette: Palette = STANDARD_PALETTE,
    pi: float = LEGACY_PI,
) -> str:
    """Render a circular progress ring."""

    layout = layout_ring(size, percentage, pi=pi)
    return serialize_svg(ring_document(layout, palette))


def render_waffle(
    width: int, square_count: int, percentage: int, palette: Palette = STANDARD_PALETTE
) -> str:
    """Render a waffle grid with a proportional number of filled squares."""

    layout = layout_waffle(width, square_count, percentage)
    return serialize_svg(waffle_document(layout, palette))


def render_gauge(
    width: int, percentage: int, palette: Palette = STANDARD_PALETTE
) -> str:
    """Render a half-dial gauge with a needle."""

    layout = layout_gauge(width, percentage, palette)
    return serialize_svg(gauge_document(layout, palette))
