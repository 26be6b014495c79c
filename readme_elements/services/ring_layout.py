from dataclasses import dataclass

from readme_elements.core.numeric import clamp
from readme_elements.core.palette import LEGACY_PI
from readme_elements.core.palette import Palette
from readme_elements.svg.serializer import format_number
from readme_elements.svg.shapes import Circle
from readme_elements.svg.shapes import SvgDocument
from readme_elements.svg.shapes import Text


DEFAULT_SIZE = 100
STROKE_WIDTH = 15


@dataclass(frozen=True)
class RingLayout:
    """Dash lengths for a ring drawn as a partially stroked circle.

    The radius goes negative for sizes below 30; the document is still
    produced and simply renders as a degenerate ring.
    """

    size: int
    percentage: int
    stroke_width: int
    radius: float
    circumference: float
    filled_length: float
    unfilled_length: float
    center: float
    font_size: float


def layout_ring(size: int, percentage: int, pi: float = LEGACY_PI) -> RingLayout:
    percentage = clamp(percentage, 0, 100)
    radius = size / 2 - STROKE_WIDTH
    circumference = 2 * pi * radius
    filled_length = circumference * percentage / 100
    return RingLayout(
        size=size,
        percentage=percentage,
        stroke_width=STROKE_WIDTH,
        radius=radius,
        circumference=circumference,
        filled_length=filled_length,
        unfilled_length=circumference - filled_length,
        center=size / 2,
        font_size=size / 5,
    )


def ring_document(layout: RingLayout, palette: Palette) -> SvgDocument:
    center = format_number(layout.center)
    return SvgDocument(
        width=f"{layout.size}px",
        height=f"{layout.size}px",
        view_box=(0, 0, layout.size, layout.size),
        children=(
            Circle(
                cx=layout.center,
                cy=layout.center,
                r=layout.radius,
                stroke=palette.inactive,
                stroke_width=layout.stroke_width,
                fill=palette.white,
            ),
            Circle(
                cx=layout.center,
                cy=layout.center,
                r=layout.radius,
                stroke=palette.active,
                stroke_width=layout.stroke_width,
                fill="none",
                stroke_dasharray=(layout.filled_length, layout.unfilled_length),
                stroke_dashoffset=0,
                transform=f"rotate(-90, {center}, {center})",
            ),
            Text(
                x=layout.center,
                y=layout.center,
                content=f"{layout.percentage}%",
                font_size=f"{format_number(layout.font_size)}px",
                fill=palette.black,
                dominant_baseline="central",
                font_family="Arial, Helvetica, sans-serif",
                font_weight="bold",
            ),
        ),
    )
