"""
Page and slot structure of the grid, and its reconciliation against a list of
entries.

Pages partition the visible entries into contiguous runs of page_size items.
Reconciling only ever trims or grows the tail of the page list, and the tail of
a page's slots, so existing pages and cells are reused. Every slot that
survives is rebound since an insert or remove shifts all later entries.
"""
import abc
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from appgrid.cache import OutlineCache
from appgrid.entry import Entry
from appgrid.paginate import GridPaginator, PageOutOfRangeError, Position

logger = logging.getLogger(__name__)


class CellRenderer(abc.ABC):
    """Creates and releases the rendered cell behind each slot"""

    @abc.abstractmethod
    def materialize_cell(self, entry: Entry) -> Any:
        """Return a new cell handle to show entry"""

    @abc.abstractmethod
    def release_cell(self, cell: Any) -> None:
        """Free any resources held by a cell that was removed from its page"""

    def bind_cell(
            self,
            cell: Any,
            entry: Entry,
            position: Position,
            outline_cache: Optional[OutlineCache] = None,
            ) -> None:
        """Show entry at position in an existing cell

        Outlines derived from the entry should go through outline_cache so they
        are released when the entry leaves the grid.
        """


@dataclass
class Slot:
    cell: Any
    entry: Entry
    row: int = 0
    col: int = 0


@dataclass
class Page:
    cell_count_x: int
    cell_count_y: int
    slots: list[Slot] = field(default_factory=list)

    @property
    def capacity(self) -> int:
        return self.cell_count_x * self.cell_count_y

    def __len__(self) -> int:
        return len(self.slots)


class PagedGrid:
    def __init__(
            self,
            paginator: GridPaginator,
            renderer: CellRenderer,
            outline_cache: Optional[OutlineCache] = None,
            ):
        self.paginator = paginator
        self.renderer = renderer
        self.outline_cache = outline_cache
        self.pages: list[Page] = []

    def __len__(self) -> int:
        return len(self.pages)

    def page(self, page_idx: int) -> Page:
        if not 0 <= page_idx < len(self.pages):
            raise PageOutOfRangeError(
                "Page {} out of range for {} pages".format(page_idx, len(self.pages))
            )
        return self.pages[page_idx]

    def _release_page(self, page: Page) -> None:
        for slot in reversed(page.slots):
            self.renderer.release_cell(slot.cell)
        page.slots.clear()

    def sync_pages(self, n_items: int) -> None:
        """Add or remove trailing pages so there are exactly enough for n_items"""
        n_pages = self.paginator.n_pages(n_items)
        cur_n_pages = len(self.pages)

        # Remove any extra pages after the last page, highest first
        for page_idx in range(cur_n_pages - 1, n_pages - 1, -1):
            self._release_page(self.pages.pop(page_idx))

        for _ in range(cur_n_pages, n_pages):
            self.pages.append(Page(self.paginator.cols, self.paginator.rows))

        if cur_n_pages != n_pages:
            logger.debug("Synced pages {} -> {}".format(cur_n_pages, n_pages))

    def sync_page_items(self, page_idx: int, items: Sequence[Entry]) -> None:
        """Make the slots of one page match its share of items"""
        page = self.page(page_idx)
        page_range = range(
            page_idx * self.paginator.page_size,
            min((page_idx + 1) * self.paginator.page_size, len(items)),
        )
        cur_n_slots = len(page.slots)
        n_slots = len(page_range)

        for slot_idx in range(cur_n_slots - 1, n_slots - 1, -1):
            self.renderer.release_cell(page.slots.pop(slot_idx).cell)

        for slot_idx in range(cur_n_slots, n_slots):
            entry = items[page_range[slot_idx]]
            page.slots.append(Slot(cell=self.renderer.materialize_cell(entry), entry=entry))

        for slot_idx, abs_idx in enumerate(page_range):
            slot = page.slots[slot_idx]
            position = self.paginator.locate_rel(page_idx, slot_idx)
            slot.entry = items[abs_idx]
            slot.row = position.row
            slot.col = position.col
            self.renderer.bind_cell(slot.cell, slot.entry, position, self.outline_cache)

        if cur_n_slots != n_slots:
            logger.debug(
                "Synced page {} slots {} -> {}".format(page_idx, cur_n_slots, n_slots)
            )

    def clear(self) -> None:
        while self.pages:
            self._release_page(self.pages.pop())
