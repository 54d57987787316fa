"""
Plain text cells for showing pages in a terminal.
"""
from dataclasses import dataclass
from typing import Optional, Sequence

from appgrid.cache import OutlineCache
from appgrid.defaults import TEXT_CELL_WIDTH
from appgrid.entry import Entry
from appgrid.pages import CellRenderer
from appgrid.paginate import Position


@dataclass(eq=False)
class TextCell:
    label: str = ""
    outline: str = ""
    row: int = 0
    col: int = 0


def truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    if width <= 1:
        return text[:width]
    return text[:width - 1] + "…"


def make_outline(entry: Entry) -> str:
    """A one letter badge standing in for the entry's icon outline"""
    return "[{}]".format(entry.title[:1].upper() or "?")


class TextCellRenderer(CellRenderer):
    """Cells are fixed width labels. Tracks live cells so leaks show up"""

    def __init__(self, width: int = TEXT_CELL_WIDTH):
        self.width = width
        self.live_cells: list[TextCell] = []
        self.n_materialized = 0
        self.n_released = 0

    def materialize_cell(self, entry: Entry) -> TextCell:
        cell = TextCell(label=truncate(entry.title, self.width))
        self.live_cells.append(cell)
        self.n_materialized += 1
        return cell

    def release_cell(self, cell: TextCell) -> None:
        self.live_cells.remove(cell)
        self.n_released += 1

    def bind_cell(
            self,
            cell: TextCell,
            entry: Entry,
            position: Position,
            outline_cache: Optional[OutlineCache] = None,
            ) -> None:
        cell.label = truncate(entry.title, self.width)
        if outline_cache is not None:
            cell.outline = outline_cache.get(entry, make_outline)
        else:
            cell.outline = make_outline(entry)
        cell.row = position.row
        cell.col = position.col


def draw_page(slots: Sequence, cols: int, rows: int, width: int = TEXT_CELL_WIDTH) -> str:
    """Draw (row, col, entry) slots as a boxed text grid with cols x rows cells"""
    labels = [["" for _ in range(cols)] for _ in range(rows)]
    for row, col, entry in slots:
        labels[row][col] = truncate(entry.title, width)

    horizontal = "─" * (width + 2)
    top = "┌" + "┬".join([horizontal] * cols) + "┐"
    middle = "├" + "┼".join([horizontal] * cols) + "┤"
    bottom = "└" + "┴".join([horizontal] * cols) + "┘"

    lines = [top]
    for row_idx, row in enumerate(labels):
        lines.append("│" + "│".join(" {} ".format(label.ljust(width)) for label in row) + "│")
        lines.append(middle if row_idx < rows - 1 else bottom)
    return "\n".join(lines)
