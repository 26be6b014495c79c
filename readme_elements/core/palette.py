import math
from dataclasses import dataclass


LEGACY_PI = 3.14
FULL_PI = math.pi


@dataclass(frozen=True)
class Palette:
    """Colour constants shared by every widget."""

    active: str
    inactive: str
    white: str
    black: str
    grey: str
    bands: tuple[str, str, str, str, str]
    calendar_marked: str = "#4c1"
    calendar_unmarked: str = "#f0f0f0"
    calendar_border: str = "#ddd"
    navigation_button: str = "#007bff"


STANDARD_PALETTE = Palette(
    active="#44CC11",
    inactive="#7A7A7A",
    white="white",
    black="black",
    grey="#7A7A7A",
    bands=("red", "orange", "yellow", "#99F255", "#44CC11"),
)

CLASSIC_PALETTE = Palette(
    active="#4c1",
    inactive="lightgrey",
    white="white",
    black="black",
    grey="lightgrey",
    bands=("red", "orange", "yellow", "#99F255", "#4c1"),
)

PALETTES: dict[str, Palette] = {
    "standard": STANDARD_PALETTE,
    "classic": CLASSIC_PALETTE,
}


def get_palette(name: str) -> Palette:
    """Look up a named palette, raising KeyError for unknown names."""

    return PALETTES[name]
