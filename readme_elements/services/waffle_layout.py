import math
from dataclasses import dataclass

from readme_elements.core.numeric import clamp
from readme_elements.core.numeric import div
from readme_elements.core.numeric import mod
from readme_elements.core.palette import Palette
from readme_elements.svg.shapes import Rect
from readme_elements.svg.shapes import SvgDocument


DEFAULT_WIDTH = 100
DEFAULT_SQUARE_COUNT = 100
GAP = 3
MIN_SQUARE_SIZE = 10


@dataclass(frozen=True)
class WaffleSquare:
    x: int
    y: int
    filled: bool


@dataclass(frozen=True)
class WaffleLayout:
    width: int
    height: int
    square_size: int
    squares_per_row: int
    squares_per_column: int
    filled_count: int
    squares: tuple[WaffleSquare, ...]


def normalize_dimensions(width: int, square_count: int) -> tuple[int, int]:
    """Replace non-positive width or square count with the defaults."""

    if width <= 0:
        width = DEFAULT_WIDTH
    if square_count <= 0:
        square_count = DEFAULT_SQUARE_COUNT
    return width, square_count


def calculate_grid_size(
    width: int, square_count: int, gap: int = GAP
) -> tuple[int, int]:
    """Return (squares per row, squares per column) for a roughly square grid."""

    width, square_count = normalize_dimensions(width, square_count)

    estimated_per_row = math.isqrt(square_count)
    adjusted_width = width - (estimated_per_row - 1) * gap
    ideal_square_size = int(max(MIN_SQUARE_SIZE, adjusted_width / estimated_per_row))

    squares_per_row = max(1, div(adjusted_width, ideal_square_size))
    squares_per_column = div(square_count, squares_per_row)
    if mod(square_count, squares_per_row) != 0:
        squares_per_column += 1

    return squares_per_row, squares_per_column


def square_width(width: int, squares_per_row: int, gap: int = GAP) -> int:
    return div(width - gap * (squares_per_row - 1), squares_per_row)


def generate_squares(
    width: int,
    squares_per_row: int,
    square_count: int,
    filled_count: int,
    gap: int = GAP,
) -> tuple[WaffleSquare, ...]:
    """Place squares in row-major order; the first `filled_count` are filled."""

    available_width = width - gap * (squares_per_row - 1)
    size = div(available_width, squares_per_row)
    extra_width = div(mod(available_width, squares_per_row), squares_per_row)

    squares = []
    for index in range(square_count):
        column = mod(index, squares_per_row)
        row = div(index, squares_per_row)
        squares.append(
            WaffleSquare(
                x=gap + column * (size + gap + extra_width),
                y=gap + row * (size + gap),
                filled=index < filled_count,
            )
        )
    return tuple(squares)


def layout_waffle(width: int, square_count: int, percentage: int) -> WaffleLayout:
    width, square_count = normalize_dimensions(width, square_count)
    percentage = clamp(percentage, 0, 100)

    squares_per_row, squares_per_column = calculate_grid_size(width, square_count)
    size = square_width(width, squares_per_row)
    filled_count = div(square_count * percentage, 100)

    return WaffleLayout(
        width=(size + GAP) * squares_per_row + GAP,
        height=(size + GAP) * squares_per_column + GAP,
        square_size=size,
        squares_per_row=squares_per_row,
        squares_per_column=squares_per_column,
        filled_count=filled_count,
        squares=generate_squares(width, squares_per_row, square_count, filled_count),
    )


def waffle_document(layout: WaffleLayout, palette: Palette) -> SvgDocument:
    size = f"{layout.square_size}px"
    squares = tuple(
        Rect(
            x=f"{square.x}px",
            y=f"{square.y}px",
            width=size,
            height=size,
            fill=palette.active if square.filled else palette.inactive,
            css_class="gridSquare",
        )
        for square in layout.squares
    )
    background = Rect(
        x=0,
        y=0,
        width=f"{layout.width}px",
        height=f"{layout.height}px",
        fill="none",
    )
    return SvgDocument(
        width=f"{layout.width}px",
        height=f"{layout.height}px",
        children=(background, *squares),
    )
