from readme_elements.svg.serializer import format_number
from readme_elements.svg.serializer import serialize_shape
from readme_elements.svg.serializer import serialize_svg
from readme_elements.svg.shapes import Circle
from readme_elements.svg.shapes import Group
from readme_elements.svg.shapes import Polygon
from readme_elements.svg.shapes import Rect
from readme_elements.svg.shapes import Script
from readme_elements.svg.shapes import SvgDocument
from readme_elements.svg.shapes import Text


def test_format_number_drops_integral_fraction() -> None:
    assert format_number(50.0) == "50"
    assert format_number(36.5) == "36.5"
    assert format_number(7) == "7"
    assert format_number(-0.5) == "-0.5"
    assert format_number(50 * 1.1) == "55.00000000000001"


def test_rect_skips_unset_attributes() -> None:
    markup = serialize_shape(Rect(x=15, y=45, width=40, height=40, fill="#4c1"))

    assert markup == '<rect x="15" y="45" width="40" height="40" fill="#4c1" />'


def test_circle_writes_dasharray_pair() -> None:
    markup = serialize_shape(
        Circle(
            cx=50.0,
            cy=50.0,
            r=35.0,
            stroke="#44CC11",
            stroke_width=15,
            fill="none",
            stroke_dasharray=(0.0, 219.8),
        )
    )

    assert 'stroke-dasharray="0, 219.8"' in markup
    assert 'cx="50" cy="50" r="35"' in markup


def test_text_content_is_escaped() -> None:
    markup = serialize_shape(Text(x=1, y=2, content="<a & b>", font_size=12, fill="black"))

    assert markup.endswith(">&lt;a &amp; b&gt;</text>")


def test_polygon_and_group_render_children() -> None:
    group = Group(
        children=(Polygon(points=((1.0, 2.5), (3, 4)), fill="black"),),
        element_id="needle",
    )

    assert serialize_shape(group) == (
        '<g id="needle"><polygon points="1,2.5 3,4" fill="black" /></g>'
    )


def test_script_is_wrapped_in_cdata() -> None:
    markup = serialize_shape(Script("if (a < b) { go(); }"))

    assert markup == (
        '<script type="text/ecmascript"><![CDATA[if (a < b) { go(); }]]></script>'
    )


def test_document_root_attributes() -> None:
    document = SvgDocument(width="100px", height="50px", view_box=(0, 0, 100, 50.0))

    assert serialize_svg(document) == (
        '<svg width="100px" height="50px" viewBox="0 0 100 50" '
        'xmlns="http://www.w3.org/2000/svg"></svg>'
    )


def test_document_with_xlink_namespace() -> None:
    markup = serialize_svg(SvgDocument(width=1, height=1, xlink=True, font_family="Arial"))

    assert 'xmlns:xlink="http://www.w3.org/1999/xlink"' in markup
    assert markup.startswith('<svg width="1" height="1" xmlns=')
    assert 'font-family="Arial"' in markup
