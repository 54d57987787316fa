"""
Per-entry outline cache shared by the cells of the grid.
"""
import logging
from typing import Any, Callable

from appgrid.entry import ComponentName, Entry

logger = logging.getLogger(__name__)


class OutlineCache:
    """Outlines (or any derived icon data) keyed by entry identity

    The grid releases an entry's outline when the entry leaves the collection
    and clears the whole cache when the collection is replaced.
    """

    def __init__(self):
        self._outlines: dict[ComponentName, Any] = {}

    def __len__(self) -> int:
        return len(self._outlines)

    def __contains__(self, identity: ComponentName) -> bool:
        return identity in self._outlines

    def get(self, entry: Entry, factory: Callable[[Entry], Any]) -> Any:
        if entry.identity not in self._outlines:
            self._outlines[entry.identity] = factory(entry)
        return self._outlines[entry.identity]

    def release_outline(self, identity: ComponentName) -> None:
        if self._outlines.pop(identity, None) is not None:
            logger.debug("Released outline for %s", identity)

    def clear(self) -> None:
        self._outlines.clear()
