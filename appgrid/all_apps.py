"""
The all-apps grid: a sorted, filterable list of entries laid out on pages.

Every mutation re-projects the filtered entries and reconciles the pages.
Only the active page has its slots reconciled right away; other pages are
marked stale and reconciled when they are read or become active.
"""
import logging
from collections import namedtuple
from typing import Iterable, Optional, Sequence, Union

from appgrid import events
from appgrid.cache import OutlineCache
from appgrid.collection import SortedCollection
from appgrid.config import GridConfig
from appgrid.defaults import DEFAULT_CELL_COUNT_X, DEFAULT_CELL_COUNT_Y
from appgrid.entry import ComponentName, Entry, dump_entries
from appgrid.filtering import ALL_APPS, describe_selector, project
from appgrid.pages import CellRenderer, PagedGrid
from appgrid.paginate import Position
from appgrid.visibility import Visibility, ZoomState

logger = logging.getLogger(__name__)


SlotView = namedtuple("SlotView", [
    "row",
    "col",
    "entry",
])

Target = Union[int, ComponentName, Entry]


class AllAppsGrid(object):

    def __init__(
            self,
            renderer: CellRenderer,
            cell_count_x: int = DEFAULT_CELL_COUNT_X,
            cell_count_y: int = DEFAULT_CELL_COUNT_Y,
            app_filter: int = ALL_APPS,
            outline_cache: Optional[OutlineCache] = None,
            listener: events.Listener = events.ignore,
            ):
        self.config = GridConfig(
            cell_count_x=cell_count_x,
            cell_count_y=cell_count_y,
            app_filter=app_filter,
        )
        self.paginator = self.config.paginator()
        self.outline_cache = outline_cache if outline_cache is not None else OutlineCache()
        self.listener = listener

        self.collection = SortedCollection()
        self.grid = PagedGrid(self.paginator, renderer, self.outline_cache)
        self.zoom_state = ZoomState(listener)

        self._filtered: Sequence[Entry] = project(self.collection.entries, self.app_filter)
        self._current_page = 0
        self._stale_pages: set[int] = set()

    @classmethod
    def from_config(cls, config: GridConfig, renderer: CellRenderer, **kwargs):
        return cls(
            renderer,
            cell_count_x=config.cell_count_x,
            cell_count_y=config.cell_count_y,
            app_filter=config.app_filter,
            **kwargs,
        )

    @property
    def app_filter(self) -> int:
        return self.config.app_filter

    @property
    def entries(self) -> Sequence[Entry]:
        return self.collection.entries

    @property
    def filtered_entries(self) -> Sequence[Entry]:
        return self._filtered

    def _rebuild_filtered(self) -> None:
        self._filtered = project(self.collection.entries, self.app_filter)

    def set_entries(self, entries: Iterable[Entry]) -> None:
        self.collection.set(entries)
        self._rebuild_filtered()
        self.outline_cache.clear()
        self.grid.clear()
        self._current_page = 0
        self.invalidate_page_data()

    def add_entries(self, entries: Iterable[Entry]) -> None:
        self.collection.insert(entries)
        self._rebuild_filtered()
        self.invalidate_page_data()

    def _release_outlines(self, removed: Iterable[Entry]) -> None:
        for entry in removed:
            self.outline_cache.release_outline(entry.identity)

    def remove_entries(self, entries: Iterable[Entry]) -> None:
        self._release_outlines(self.collection.remove(entries))
        self._rebuild_filtered()
        self.invalidate_page_data()

    def update_entries(self, entries: Iterable[Entry]) -> None:
        self._release_outlines(self.collection.update(entries))
        self._rebuild_filtered()
        self.invalidate_page_data()

    def set_filter(self, app_filter: int) -> None:
        logger.debug("Setting app filter to %s", describe_selector(app_filter))
        self.config = self.config.model_copy(update={"app_filter": app_filter})
        self._rebuild_filtered()
        self._current_page = 0
        self.invalidate_page_data()

    def sync_pages(self) -> None:
        self.grid.sync_pages(len(self._filtered))
        self._current_page = max(0, min(self.page_count - 1, self._current_page))

    def sync_page_items(self, page: int) -> None:
        self.grid.sync_page_items(page, self._filtered)
        self._stale_pages.discard(page)

    def invalidate_page_data(self) -> None:
        self.sync_pages()
        self._stale_pages = set(range(self.page_count))
        if self.page_count:
            self.sync_page_items(self._current_page)

    @property
    def page_count(self) -> int:
        return len(self.grid)

    @property
    def active_page(self) -> int:
        return self._current_page

    def set_active_page(self, page: int) -> None:
        self._current_page = max(0, min(self.page_count - 1, page))
        if self._current_page in self._stale_pages:
            self.sync_page_items(self._current_page)

    def slots_for_page(self, page: int) -> list[SlotView]:
        page_ = self.grid.page(page)
        if page in self._stale_pages:
            self.sync_page_items(page)
        return [SlotView(slot.row, slot.col, slot.entry) for slot in page_.slots]

    def index_of(self, identity: ComponentName) -> int:
        """Index of an entry among the filtered entries, or -1"""
        for i, entry in enumerate(self._filtered):
            if entry.identity == identity:
                return i
        return -1

    def locate(self, identity: ComponentName) -> Optional[Position]:
        idx = self.index_of(identity)
        if idx < 0:
            return None
        return self.paginator.locate(idx)

    def _resolve_on_active_page(self, target: Target) -> Optional[Entry]:
        """Find the target among the filtered entries if it lies on the active page"""
        if isinstance(target, int):
            idx = target if 0 <= target < len(self._filtered) else -1
        else:
            idx = self.index_of(target.identity if isinstance(target, Entry) else target)

        if idx < 0:
            logger.debug("Ignoring event for %s, not shown", target)
            return None
        elif self.paginator.item_to_page(idx) != self._current_page:
            logger.debug("Ignoring event for %s, not on page %d", target, self._current_page)
            return None
        return self._filtered[idx]

    def click(self, target: Target) -> bool:
        entry = self._resolve_on_active_page(target)
        if entry is None:
            return False
        self.listener(events.Activate(entry=entry))
        return True

    def long_press(self, target: Target, in_touch_mode: bool = True) -> bool:
        if not in_touch_mode:
            return False
        entry = self._resolve_on_active_page(target)
        if entry is None:
            return False
        self.listener(events.DragRequested(entry=entry.copy_for_drag()))
        return True

    def zoom(self, degree: float, animate: bool = False) -> None:
        self.zoom_state.zoom(degree, animate=animate)

    def on_animation_end(self) -> None:
        self.zoom_state.on_animation_end()

    @property
    def zoom_degree(self) -> float:
        return self.zoom_state.degree

    @property
    def is_visible(self) -> bool:
        return self.zoom_state.is_visible

    @property
    def is_animating(self) -> bool:
        return self.zoom_state.is_animating

    @property
    def visibility(self) -> Visibility:
        return self.zoom_state.visibility

    def dump_state(self) -> None:
        dump_entries("AllAppsGrid entries", self.collection)
