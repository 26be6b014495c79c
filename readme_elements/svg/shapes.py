from dataclasses import dataclass
from dataclasses import field


SVG_MEDIA_TYPE = "image/svg+xml"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

# Plain numbers are written as-is; strings carry their own unit, e.g. "221px".
Length = int | float | str


@dataclass(frozen=True)
class Rect:
    x: Length
    y: Length
    width: Length
    height: Length
    fill: str
    rx: Length | None = None
    ry: Length | None = None
    stroke: str | None = None
    css_class: str | None = None
    element_id: str | None = None


@dataclass(frozen=True)
class Circle:
    cx: Length
    cy: Length
    r: Length
    stroke: str
    stroke_width: Length
    fill: str
    stroke_dasharray: tuple[float, float] | None = None
    stroke_dashoffset: Length | None = None
    transform: str | None = None


@dataclass(frozen=True)
class Path:
    d: str
    fill: str


@dataclass(frozen=True)
class Polygon:
    points: tuple[tuple[float, float], ...]
    fill: str


@dataclass(frozen=True)
class Text:
    x: Length
    y: Length
    content: str
    font_size: Length
    fill: str
    text_anchor: str = "middle"
    dominant_baseline: str | None = None
    font_family: str | None = None
    font_weight: str | None = None
    element_id: str | None = None


@dataclass(frozen=True)
class Group:
    children: tuple["Shape", ...]
    element_id: str | None = None
    onmousedown: str | None = None
    style: str | None = None


@dataclass(frozen=True)
class Script:
    """Opaque client-side script embedded verbatim in a CDATA section."""

    source: str


Shape = Rect | Circle | Path | Polygon | Text | Group | Script


@dataclass(frozen=True)
class SvgDocument:
    """Root `<svg>` element and its ordered children."""

    width: Length
    height: Length
    children: tuple[Shape, ...] = field(default_factory=tuple)
    view_box: tuple[float, float, float, float] | None = None
    font_family: str | None = None
    xlink: bool = False
