import math

import pytest

from readme_elements.core.palette import STANDARD_PALETTE
from readme_elements.services.gauge_layout import layout_gauge
from readme_elements.services.gauge_layout import needle_position
from readme_elements.services.gauge_layout import pie_path
from readme_elements.services.render import render_gauge


@pytest.mark.parametrize(
    ("center", "radius", "start", "end", "expected"),
    [
        (
            100,
            100,
            180,
            216,
            "M 0.000000,100.000000 A 100.000000,100.000000 0 0 1 19.098301,41.221475 "
            "L 100.000000,100.000000 L 0.000000,100.000000 Z",
        ),
        (
            100,
            100,
            216,
            252,
            "M 19.098301,41.221475 A 100.000000,100.000000 0 0 1 69.098301,4.894348 "
            "L 100.000000,100.000000 L 19.098301,41.221475 Z",
        ),
        (
            100,
            100,
            0,
            270,
            "M 200.000000,100.000000 A 100.000000,100.000000 0 0 1 100.000000,0.000000 "
            "L 100.000000,100.000000 L 200.000000,100.000000 Z",
        ),
        (
            100,
            0,
            0,
            90,
            "M 100.000000,100.000000 A 0.000000,0.000000 0 0 1 100.000000,100.000000 "
            "L 100.000000,100.000000 L 100.000000,100.000000 Z",
        ),
        (
            100,
            100,
            -90,
            -45,
            "M 100.000000,0.000000 A 100.000000,100.000000 0 0 1 170.710678,29.289322 "
            "L 100.000000,100.000000 L 100.000000,0.000000 Z",
        ),
    ],
)
def test_pie_path(center: float, radius: float, start: float, end: float, expected: str) -> None:
    assert pie_path(center, radius, start, end) == expected


@pytest.mark.parametrize(
    ("percentage", "expected"),
    [
        (0, [(91.222218, 90.294286), (91.222218, 109.705714), (10.0, 100.0)]),
        (50, [(109.705714, 91.222218), (90.294286, 91.222218), (100.0, 10.0)]),
        (100, [(108.777782, 109.705714), (108.777782, 90.294286), (190.0, 100.0)]),
    ],
)
def test_needle_position(percentage: int, expected: list[tuple[float, float]]) -> None:
    needle = needle_position(100.0, percentage)

    for actual, wanted in zip(needle.points, expected, strict=True):
        assert actual == pytest.approx(wanted, abs=1e-5)


def test_half_way_needle_points_straight_up() -> None:
    layout = layout_gauge(100, 50, STANDARD_PALETTE)
    tip_x, tip_y = layout.needle.points[2]

    assert layout.center == 50
    assert layout.needle.angle == pytest.approx(1.5 * math.pi)
    assert math.sin(layout.needle.angle) == pytest.approx(-1.0)
    assert (tip_x, tip_y) == pytest.approx((50.0, 5.0))


def test_wedges_follow_band_order() -> None:
    layout = layout_gauge(100, 0, STANDARD_PALETTE)

    assert [wedge.fill for wedge in layout.wedges] == list(STANDARD_PALETTE.bands)
    assert [wedge.start_angle for wedge in layout.wedges] == [180, 216, 252, 288, 324]
    assert layout.wedges[-1].end_angle == 360
    assert layout.decorative_radii == (25, 10, 5)


def test_gauge_defaults_and_clamps() -> None:
    assert layout_gauge(-10, 30, STANDARD_PALETTE).width == 100
    assert layout_gauge(100, 101, STANDARD_PALETTE).percentage == 100
    assert layout_gauge(100, -1, STANDARD_PALETTE).percentage == 0


def test_render_gauge_markup() -> None:
    markup = render_gauge(100, 50)

    assert markup.startswith(
        '<svg width="100px" height="50px" viewBox="0 0 100 50" '
        'xmlns="http://www.w3.org/2000/svg">'
    )
    assert (
        '<path d="M 0.000000,50.000000 A 50.000000,50.000000 0 0 1 9.549150,20.610737 '
        'L 50.000000,50.000000 L 0.000000,50.000000 Z" fill="red" />'
    ) in markup
    assert markup.index('fill="red"') < markup.index('fill="orange"')
    assert markup.index('fill="yellow"') < markup.index('fill="#99F255"')
    assert '<path d="M50,50 L25,50 A25,25 0 1,1 75,50 Z" fill="white" />' in markup
    assert '<path d="M50,50 L40,50 A10,10 0 1,1 60,50 Z" fill="black" />' in markup
    assert (
        '<path d="M50,50 L45,50 A5,5 0 1,1 55.00000000000001,50 Z" fill="#7A7A7A" />'
        in markup
    )
    assert markup.count("<polygon") == 1


def test_render_gauge_is_idempotent() -> None:
    assert render_gauge(240, 37) == render_gauge(240, 37)
