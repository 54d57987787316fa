from .all_apps import AllAppsGrid, SlotView
from .cache import OutlineCache
from .config import GridConfig
from .entry import AppFlags, ComponentName, Entry
from .filtering import ALL_APPS
from .pages import CellRenderer
from .paginate import GridPaginator, PageOutOfRangeError, Position


__all__ = [
    "ALL_APPS",
    "AllAppsGrid",
    "AppFlags",
    "CellRenderer",
    "ComponentName",
    "Entry",
    "GridConfig",
    "GridPaginator",
    "OutlineCache",
    "PageOutOfRangeError",
    "Position",
    "SlotView",
]
