import math
from dataclasses import dataclass

from readme_elements.core.numeric import clamp
from readme_elements.core.numeric import mult
from readme_elements.core.numeric import radians
from readme_elements.core.palette import Palette
from readme_elements.svg.serializer import format_number
from readme_elements.svg.shapes import Path
from readme_elements.svg.shapes import Polygon
from readme_elements.svg.shapes import SvgDocument


DEFAULT_WIDTH = 100
WEDGE_ANGLE = 36.0
WEDGE_START = 180.0
NEEDLE_LENGTH_RATIO = 0.45
NEEDLE_BASE_RATIO = 0.75
NEEDLE_HALF_ANGLE = 15.0
# (radius, left edge, right edge) as multiples of the centre coordinate.
DECORATIVE_DISCS = ((0.5, 0.5, 1.5), (0.2, 0.8, 1.2), (0.1, 0.9, 1.1))


@dataclass(frozen=True)
class Needle:
    """Triangle pointing from the gauge centre towards the percentage."""

    angle: float
    points: tuple[tuple[float, float], tuple[float, float], tuple[float, float]]


@dataclass(frozen=True)
class Wedge:
    start_angle: float
    end_angle: float
    path: str
    fill: str


@dataclass(frozen=True)
class GaugeLayout:
    width: int
    percentage: int
    center: float
    wedges: tuple[Wedge, ...]
    needle: Needle

    @property
    def decorative_radii(self) -> tuple[float, ...]:
        return tuple(mult(self.center, disc[0]) for disc in DECORATIVE_DISCS)


def pie_path(center: float, radius: float, start_angle: float, end_angle: float) -> str:
    """Outline of a circular sector between two angles given in degrees."""

    start_x = center + radius * math.cos(radians(start_angle))
    start_y = center + radius * math.sin(radians(start_angle))
    end_x = center + radius * math.cos(radians(end_angle))
    end_y = center + radius * math.sin(radians(end_angle))

    return (
        f"M {start_x:f},{start_y:f} A {radius:f},{radius:f} 0 0 1 {end_x:f},{end_y:f} "
        f"L {center:f},{center:f} L {start_x:f},{start_y:f} Z"
    )


def needle_position(center: float, percentage: int) -> Needle:
    angle = percentage / 100 * math.pi + math.pi

    length = center * NEEDLE_LENGTH_RATIO
    tip_x = center + length * math.cos(angle)
    tip_y = center + length * math.sin(angle)

    half_base = center * NEEDLE_BASE_RATIO * 0.5
    offset = NEEDLE_HALF_ANGLE * (math.pi / 180)

    first = (
        tip_x - half_base * math.cos(angle - offset),
        tip_y - half_base * math.sin(angle - offset),
    )
    second = (
        tip_x - half_base * math.cos(angle + offset),
        tip_y - half_base * math.sin(angle + offset),
    )
    third = (
        tip_x + length * math.cos(angle),
        tip_y + length * math.sin(angle),
    )
    return Needle(angle=angle, points=(first, second, third))


def layout_gauge(width: int, percentage: int, palette: Palette) -> GaugeLayout:
    """Lay out the five-band half dial and its needle."""

    if width <= 0:
        width = DEFAULT_WIDTH
    percentage = clamp(percentage, 0, 100)
    center = width / 2

    wedges = []
    for index, fill in enumerate(palette.bands):
        start = WEDGE_START + index * WEDGE_ANGLE
        end = WEDGE_START + (index + 1) * WEDGE_ANGLE
        wedges.append(
            Wedge(
                start_angle=start,
                end_angle=end,
                path=pie_path(center, center, start, end),
                fill=fill,
            )
        )

    return GaugeLayout(
        width=width,
        percentage=percentage,
        center=center,
        wedges=tuple(wedges),
        needle=needle_position(center, percentage),
    )


def _half_disc(center: float, disc: tuple[float, float, float], fill: str) -> Path:
    c = format_number(center)
    radius, left, right = (format_number(mult(center, ratio)) for ratio in disc)
    d = f"M{c},{c} L{left},{c} A{radius},{radius} 0 1,1 {right},{c} Z"
    return Path(d=d, fill=fill)


def gauge_document(layout: GaugeLayout, palette: Palette) -> SvgDocument:
    outer, middle, inner = DECORATIVE_DISCS
    return SvgDocument(
        width=f"{layout.width}px",
        height=f"{format_number(layout.center)}px",
        view_box=(0, 0, layout.width, layout.center),
        children=(
            *(Path(d=wedge.path, fill=wedge.fill) for wedge in layout.wedges),
            _half_disc(layout.center, outer, palette.white),
            Polygon(points=layout.needle.points, fill=palette.black),
            _half_disc(layout.center, middle, palette.black),
            _half_disc(layout.center, inner, palette.grey),
        ),
    )
