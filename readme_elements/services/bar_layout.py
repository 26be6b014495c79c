from dataclasses import dataclass

from readme_elements.core.numeric import clamp
from readme_elements.core.numeric import div
from readme_elements.core.palette import Palette
from readme_elements.svg.shapes import Rect
from readme_elements.svg.shapes import SvgDocument
from readme_elements.svg.shapes import Text


DEFAULT_WIDTH = 200
DEFAULT_HEIGHT = 30
CORNER_RADIUS = 3


@dataclass(frozen=True)
class LinearBarLayout:
    width: int
    height: int
    percentage: int
    fill_width: int
    text_x: int
    text_y: int
    font_size: int


def layout_linear_bar(width: int, height: int, percentage: int) -> LinearBarLayout:
    """Compute the filled width and label placement of a progress bar."""

    percentage = clamp(percentage, 0, 100)
    return LinearBarLayout(
        width=width,
        height=height,
        percentage=percentage,
        fill_width=div(width * percentage, 100),
        text_x=div(width, 2),
        text_y=div(height, 2),
        font_size=div(height, 2),
    )


def linear_bar_document(layout: LinearBarLayout, palette: Palette) -> SvgDocument:
    height = f"{layout.height}px"
    return SvgDocument(
        width=f"{layout.width}px",
        height=height,
        children=(
            Rect(
                rx=CORNER_RADIUS,
                ry=CORNER_RADIUS,
                x=0,
                y=0,
                width=f"{layout.width}px",
                height=height,
                fill=palette.inactive,
            ),
            Rect(
                rx=CORNER_RADIUS,
                ry=CORNER_RADIUS,
                x=0,
                y=0,
                width=f"{layout.fill_width}px",
                height=height,
                fill=palette.active,
            ),
            Text(
                x=f"{layout.text_x}px",
                y=f"{layout.text_y}px",
                content=f"{layout.percentage}%",
                font_size=f"{layout.font_size}px",
                fill=palette.white,
                dominant_baseline="central",
                font_family="Arial, Helvetica, sans-serif",
                font_weight="bold",
            ),
        ),
    )
