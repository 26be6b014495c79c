from collections.abc import Iterable
from xml.sax.saxutils import escape
from xml.sax.saxutils import quoteattr

from readme_elements.svg.shapes import Circle
from readme_elements.svg.shapes import Group
from readme_elements.svg.shapes import Path
from readme_elements.svg.shapes import Polygon
from readme_elements.svg.shapes import Rect
from readme_elements.svg.shapes import Script
from readme_elements.svg.shapes import Shape
from readme_elements.svg.shapes import SVG_NAMESPACE
from readme_elements.svg.shapes import SvgDocument
from readme_elements.svg.shapes import Text
from readme_elements.svg.shapes import XLINK_NAMESPACE


def format_number(value: int | float) -> str:
    """Write a number in its shortest round-trip form.

    Integral floats lose their fractional part so `50.0` renders as `50`.
    """

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return format_number(value)
    return str(value)


def _attributes(pairs: Iterable[tuple[str, object]]) -> str:
    rendered = [
        f"{name}={quoteattr(format_value(value))}"
        for name, value in pairs
        if value is not None
    ]
    return " ".join(rendered)


def _element(tag: str, pairs: Iterable[tuple[str, object]]) -> str:
    return f"<{tag} {_attributes(pairs)} />"


def serialize_shape(shape: Shape) -> str:
    """Render a single shape record as markup."""

    match shape:
        case Rect():
            return _element(
                "rect",
                [
                    ("id", shape.element_id),
                    ("class", shape.css_class),
                    ("rx", shape.rx),
                    ("ry", shape.ry),
                    ("x", shape.x),
                    ("y", shape.y),
                    ("width", shape.width),
                    ("height", shape.height),
                    ("fill", shape.fill),
                    ("stroke", shape.stroke),
                ],
            )
        case Circle():
            dasharray = None
            if shape.stroke_dasharray is not None:
                filled, unfilled = shape.stroke_dasharray
                dasharray = f"{format_number(filled)}, {format_number(unfilled)}"
            return _element(
                "circle",
                [
                    ("cx", shape.cx),
                    ("cy", shape.cy),
                    ("r", shape.r),
                    ("stroke", shape.stroke),
                    ("stroke-width", shape.stroke_width),
                    ("fill", shape.fill),
                    ("stroke-dasharray", dasharray),
                    ("stroke-dashoffset", shape.stroke_dashoffset),
                    ("transform", shape.transform),
                ],
            )
        case Path():
            return _element("path", [("d", shape.d), ("fill", shape.fill)])
        case Polygon():
            points = " ".join(
                f"{format_number(x)},{format_number(y)}" for x, y in shape.points
            )
            return _element("polygon", [("points", points), ("fill", shape.fill)])
        case Text():
            attributes = _attributes(
                [
                    ("id", shape.element_id),
                    ("x", shape.x),
                    ("y", shape.y),
                    ("font-size", shape.font_size),
                    ("dominant-baseline", shape.dominant_baseline),
                    ("text-anchor", shape.text_anchor),
                    ("fill", shape.fill),
                    ("font-family", shape.font_family),
                    ("font-weight", shape.font_weight),
                ]
            )
            return f"<text {attributes}>{escape(shape.content)}</text>"
        case Group():
            attributes = _attributes(
                [
                    ("id", shape.element_id),
                    ("onmousedown", shape.onmousedown),
                    ("style", shape.style),
                ]
            )
            children = "".join(serialize_shape(child) for child in shape.children)
            return f"<g {attributes}>{children}</g>"
        case Script():
            body = shape.source.replace("]]>", "]]]]><![CDATA[>")
            return f'<script type="text/ecmascript"><![CDATA[{body}]]></script>'
    raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def serialize_svg(document: SvgDocument) -> str:
    """Render a complete document, root element first."""

    view_box = None
    if document.view_box is not None:
        view_box = " ".join(format_number(value) for value in document.view_box)

    root = _attributes(
        [
            ("width", document.width),
            ("height", document.height),
            ("viewBox", view_box),
            ("xmlns", SVG_NAMESPACE),
            ("xmlns:xlink", XLINK_NAMESPACE if document.xlink else None),
            ("font-family", document.font_family),
        ]
    )
    children = "".join(serialize_shape(child) for child in document.children)
    return f"<svg {root}>{children}</svg>"
