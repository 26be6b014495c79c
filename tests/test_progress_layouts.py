import math

import pytest

from readme_elements.core.palette import CLASSIC_PALETTE
from readme_elements.core.palette import FULL_PI
from readme_elements.services.bar_layout import layout_linear_bar
from readme_elements.services.ring_layout import layout_ring
from readme_elements.services.render import render_linear_bar
from readme_elements.services.render import render_ring


def test_linear_bar_layout() -> None:
    layout = layout_linear_bar(221, 33, 54)

    assert layout.fill_width == 119
    assert (layout.text_x, layout.text_y) == (110, 16)
    assert layout.font_size == 16


@pytest.mark.parametrize(("percentage", "clamped", "fill"), [(-10, 0, 0), (150, 100, 200)])
def test_linear_bar_clamps_percentage(percentage: int, clamped: int, fill: int) -> None:
    layout = layout_linear_bar(200, 30, percentage)

    assert layout.percentage == clamped
    assert layout.fill_width == fill


def test_render_linear_bar_markup() -> None:
    markup = render_linear_bar(221, 33, 54)

    assert markup.startswith(
        '<svg width="221px" height="33px" xmlns="http://www.w3.org/2000/svg">'
    )
    assert (
        '<rect rx="3" ry="3" x="0" y="0" width="221px" height="33px" fill="#7A7A7A" />'
        in markup
    )
    assert (
        '<rect rx="3" ry="3" x="0" y="0" width="119px" height="33px" fill="#44CC11" />'
        in markup
    )
    assert (
        '<text x="110px" y="16px" font-size="16px" dominant-baseline="central" '
        'text-anchor="middle" fill="white" font-family="Arial, Helvetica, sans-serif" '
        'font-weight="bold">54%</text>'
    ) in markup


def test_ring_layout_with_legacy_pi() -> None:
    layout = layout_ring(103, 58)

    assert layout.radius == 36.5
    assert layout.center == 51.5
    assert layout.font_size == pytest.approx(20.6)
    assert layout.circumference == pytest.approx(229.22)
    assert layout.filled_length == pytest.approx(132.9476)
    assert layout.unfilled_length == pytest.approx(96.2724)


def test_ring_layout_with_full_precision_pi() -> None:
    layout = layout_ring(103, 58, pi=FULL_PI)

    assert layout.circumference == pytest.approx(2 * math.pi * 36.5)


def test_ring_radius_may_go_negative() -> None:
    layout = layout_ring(20, 50)

    assert layout.radius == -5.0
    assert layout.circumference < 0


def test_render_ring_markup() -> None:
    markup = render_ring(103, 58)

    assert markup.startswith(
        '<svg width="103px" height="103px" viewBox="0 0 103 103" '
        'xmlns="http://www.w3.org/2000/svg">'
    )
    assert (
        '<circle cx="51.5" cy="51.5" r="36.5" stroke="#7A7A7A" stroke-width="15" '
        'fill="white" />'
    ) in markup
    assert (
        '<circle cx="51.5" cy="51.5" r="36.5" stroke="#44CC11" stroke-width="15" '
        'fill="none" stroke-dasharray="132.9476, 96.2724" stroke-dashoffset="0" '
        'transform="rotate(-90, 51.5, 51.5)" />'
    ) in markup
    assert 'font-size="20.6px"' in markup
    assert ">58%</text>" in markup


@pytest.mark.parametrize(
    ("percentage", "dasharray", "label"),
    [(-10, "0, 229.22", "0%"), (150, "229.22, 0", "100%")],
)
def test_render_ring_clamps_percentage(percentage: int, dasharray: str, label: str) -> None:
    markup = render_ring(103, percentage)

    assert f'stroke-dasharray="{dasharray}"' in markup
    assert f">{label}</text>" in markup


def test_classic_palette_ring_colours() -> None:
    markup = render_ring(100, 10, palette=CLASSIC_PALETTE)

    assert 'stroke="lightgrey"' in markup
    assert 'stroke="#4c1"' in markup


def test_render_linear_bar_is_idempotent() -> None:
    assert render_linear_bar(240, 20, 37) == render_linear_bar(240, 20, 37)


def test_render_ring_is_idempotent() -> None:
    assert render_ring(120, 42) == render_ring(120, 42)
