import calendar
import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from datetime import timedelta

from readme_elements.core.numeric import div
from readme_elements.core.numeric import mod
from readme_elements.core.palette import Palette
from readme_elements.svg.shapes import Group
from readme_elements.svg.shapes import Rect
from readme_elements.svg.shapes import Script
from readme_elements.svg.shapes import Shape
from readme_elements.svg.shapes import SvgDocument
from readme_elements.svg.shapes import Text


logger = logging.getLogger(__name__)

_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")

CELL_PITCH = 50
CELL_SIZE = 40
GRID_LEFT = 15
GRID_TOP = 45
SHORT_HEIGHT = 310
TALL_HEIGHT = 360
CANVAS_WIDTH = 370
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class InvalidInputError(ValueError):
    """Raised when a year, month or day token is not an integer."""

    def __init__(self, field: str, token: str) -> None:
        super().__init__(f"Invalid {field} format: {token}")
        self.field = field
        self.token = token


class InvalidMonthError(ValueError):
    """Raised when the month falls outside 1..12."""

    def __init__(self, month: int) -> None:
        super().__init__("Month must be between 1 and 12")
        self.month = month


@dataclass(frozen=True)
class GridCell:
    day: int
    column: int
    row: int
    is_marked: bool

    @property
    def x(self) -> int:
        return self.column * CELL_PITCH + GRID_LEFT

    @property
    def y(self) -> int:
        return self.row * CELL_PITCH + GRID_TOP


@dataclass(frozen=True)
class CalendarLayout:
    year: int
    month: int
    month_name: str
    weekday_of_first: int
    days_in_month: int
    marked_days: frozenset[int]
    cells: tuple[GridCell, ...]

    @property
    def is_tall(self) -> bool:
        return self.weekday_of_first + self.days_in_month > 35

    @property
    def height(self) -> int:
        return TALL_HEIGHT if self.is_tall else SHORT_HEIGHT


def parse_int_token(token: str, field: str) -> int:
    """Parse a base-10 integer token that fits in a signed 64-bit value."""

    if not _INTEGER_TOKEN.fullmatch(token):
        raise InvalidInputError(field, token)
    try:
        value = int(token)
    except ValueError as exc:
        raise InvalidInputError(field, token) from exc
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidInputError(field, token)
    return value


def parse_marked_days(raw: str) -> frozenset[int]:
    """Parse a comma-separated day list such as `1,2,15`."""

    tokens = raw.split(",")
    return frozenset(parse_int_token(token, "progress day") for token in tokens)


def _reference_year(year: int) -> int:
    # The Gregorian calendar repeats every 400 years; `date` stops at 9999 and
    # the following month must stay representable.
    if 1 <= year <= 9998:
        return year
    return (year - 1) % 400 + 1


def month_bounds(year: int, month: int) -> tuple[int, int]:
    """Return (weekday of the 1st with Sunday as 0, number of days)."""

    if not 1 <= month <= 12:
        raise InvalidMonthError(month)

    first = date(_reference_year(year), month, 1)
    weekday_of_first = (first.weekday() + 1) % 7

    if month == 12:
        next_first = date(first.year + 1, 1, 1)
    else:
        next_first = date(first.year, month + 1, 1)
    days_in_month = (next_first - timedelta(days=1)).day

    return weekday_of_first, days_in_month


def layout_calendar(
    year: int, month: int, marked_days: Iterable[int]
) -> CalendarLayout:
    """Place every day of the month on a 7-column grid."""

    weekday_of_first, days_in_month = month_bounds(year, month)
    marked = frozenset(marked_days)

    cells = []
    for day in range(1, days_in_month + 1):
        position = day + weekday_of_first - 1
        cells.append(
            GridCell(
                day=day,
                column=mod(position, 7),
                row=div(position, 7),
                is_marked=day in marked,
            )
        )

    return CalendarLayout(
        year=year,
        month=month,
        month_name=calendar.month_name[month],
        weekday_of_first=weekday_of_first,
        days_in_month=days_in_month,
        marked_days=marked,
        cells=tuple(cells),
    )


def _cell_shapes(cell: GridCell, palette: Palette) -> tuple[Rect, Text]:
    rect = Rect(
        x=cell.x,
        y=cell.y,
        width=CELL_SIZE,
        height=CELL_SIZE,
        fill=palette.calendar_marked if cell.is_marked else palette.calendar_unmarked,
        stroke=palette.calendar_border,
    )
    label = Text(
        x=cell.x + 20,
        y=cell.y + 25,
        content=str(cell.day),
        font_size=14,
        fill=palette.white if cell.is_marked else palette.black,
    )
    return rect, label


_NAVIGATION_SCRIPT = """
var currentYear = {year};
var currentMonth = {month};
var progressDaysMap = {{{marked}}};
var markedFill = "{marked_fill}";
var unmarkedFill = "{unmarked_fill}";
var borderColor = "{border}";
var markedText = "{marked_text}";
var unmarkedText = "{unmarked_text}";

function getDaysInMonth(year, month) {{
    return new Date(year, month, 0).getDate();
}}

function getStartDay(year, month) {{
    return new Date(year, month - 1, 1).getDay();
}}

function getMonthName(month) {{
    var months = ["January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December"];
    return months[month - 1];
}}

function updateCalendar() {{
    var daysInMonth = getDaysInMonth(currentYear, currentMonth);
    var startDay = getStartDay(currentYear, currentMonth);
    document.getElementById("monthHeader").textContent =
        getMonthName(currentMonth) + " " + currentYear;

    var grid = document.getElementById("calendarGrid");
    while (grid.firstChild) {{
        grid.removeChild(grid.firstChild);
    }}

    for (var i = 1; i <= daysInMonth; i++) {{
        var position = i + startDay - 1;
        var x = (position % 7) * 50 + 15;
        var y = Math.floor(position / 7) * 50 + 45;
        var marked = progressDaysMap[i] === true;

        var rect = document.createElementNS("http://www.w3.org/2000/svg", "rect");
        rect.setAttribute("x", x);
        rect.setAttribute("y", y);
        rect.setAttribute("width", 40);
        rect.setAttribute("height", 40);
        rect.setAttribute("fill", marked ? markedFill : unmarkedFill);
        rect.setAttribute("stroke", borderColor);
        grid.appendChild(rect);

        var text = document.createElementNS("http://www.w3.org/2000/svg", "text");
        text.setAttribute("x", x + 20);
        text.setAttribute("y", y + 25);
        text.setAttribute("font-size", 14);
        text.setAttribute("text-anchor", "middle");
        text.setAttribute("fill", marked ? markedText : unmarkedText);
        text.textContent = i;
        grid.appendChild(text);
    }}

    var height = startDay + daysInMonth > 35 ? 360 : 310;
    document.documentElement.setAttribute("height", height + "px");
    document.getElementById("bgRect").setAttribute("height", (height - 10) + "px");
}}

function prevMonth() {{
    currentMonth--;
    if (currentMonth < 1) {{
        currentMonth = 12;
        currentYear--;
    }}
    updateCalendar();
}}

function nextMonth() {{
    currentMonth++;
    if (currentMonth > 12) {{
        currentMonth = 1;
        currentYear++;
    }}
    updateCalendar();
}}
"""


def _navigation_script(layout: CalendarLayout, palette: Palette) -> Script:
    marked = ", ".join(f'"{day}": true' for day in sorted(layout.marked_days))
    return Script(
        _NAVIGATION_SCRIPT.format(
            year=layout.year,
            month=layout.month,
            marked=marked,
            marked_fill=palette.calendar_marked,
            unmarked_fill=palette.calendar_unmarked,
            border=palette.calendar_border,
            marked_text=palette.white,
            unmarked_text=palette.black,
        )
    )


def _navigation_buttons(palette: Palette) -> list[Group]:
    buttons = []
    for element_id, handler, x, label in (
        ("prevButton", "prevMonth();", 15, "← Prev"),
        ("nextButton", "nextMonth();", 295, "Next →"),
    ):
        buttons.append(
            Group(
                children=(
                    Rect(
                        x=x,
                        y=15,
                        width=60,
                        height=25,
                        fill=palette.navigation_button,
                        rx=5,
                    ),
                    Text(
                        x=x + 30,
                        y=32,
                        content=label,
                        font_size=12,
                        fill=palette.white,
                    ),
                ),
                element_id=element_id,
                onmousedown=handler,
                style="cursor:pointer;",
            )
        )
    return buttons


def calendar_document(
    layout: CalendarLayout, palette: Palette, navigation: bool = False
) -> SvgDocument:
    """Build the calendar shapes, optionally with prev/next navigation."""

    cell_shapes: list[Shape] = []
    for cell in layout.cells:
        cell_shapes.extend(_cell_shapes(cell, palette))

    children: list[Shape] = []
    if navigation:
        children.append(_navigation_script(layout, palette))

    children.append(
        Rect(
            x=5,
            y=5,
            width="360px",
            height=f"{layout.height - 10}px",
            fill=palette.white,
            rx=15,
            element_id="bgRect" if navigation else None,
        )
    )
    children.append(
        Text(
            x=180,
            y=35,
            content=f"{layout.month_name} {layout.year}",
            font_size=20,
            fill=palette.black,
            element_id="monthHeader" if navigation else None,
        )
    )

    if navigation:
        children.extend(_navigation_buttons(palette))
        children.append(Group(children=tuple(cell_shapes), element_id="calendarGrid"))
    else:
        children.extend(cell_shapes)

    logger.debug(
        "Calendar %s-%s: start=%s days=%s height=%s",
        layout.year,
        layout.month,
        layout.weekday_of_first,
        layout.days_in_month,
        layout.height,
    )

    return SvgDocument(
        width=f"{CANVAS_WIDTH}px",
        height=f"{layout.height}px",
        children=tuple(children),
        font_family="Arial",
        xlink=navigation,
    )
