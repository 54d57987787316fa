"""
The canonical, title-sorted list of entries.
"""
import bisect
import logging
from typing import Iterable, Iterator, Optional

from appgrid.entry import ComponentName, Entry
from appgrid.ordering import title_key

logger = logging.getLogger(__name__)


class SortedCollection:
    """Entries kept sorted by title and unique by component

    Insertion positions are found by binary search. Removal goes by component
    through a linear scan of the list; the side index only answers membership.
    """

    def __init__(self, entries: Iterable[Entry] = ()):
        self._entries: list[Entry] = []
        self._by_identity: dict[ComponentName, Entry] = {}
        self.set(entries)

    @property
    def entries(self) -> list[Entry]:
        """The live sorted list. Callers must not mutate it"""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __getitem__(self, idx):
        return self._entries[idx]

    def __contains__(self, item) -> bool:
        if isinstance(item, Entry):
            item = item.identity
        return item in self._by_identity

    def get(self, identity: ComponentName) -> Optional[Entry]:
        return self._by_identity.get(identity)

    def index_of(self, identity: ComponentName) -> int:
        """Position of the entry with this identity, or -1"""
        for i, entry in enumerate(self._entries):
            if entry.identity == identity:
                return i
        return -1

    def set(self, entries: Iterable[Entry]) -> None:
        unique = {}
        for entry in entries:
            if entry.identity not in unique:
                unique[entry.identity] = entry
            else:
                logger.debug("Dropping duplicate entry for %s", entry.identity)
        self._entries = sorted(unique.values(), key=title_key)
        self._by_identity = unique

    def insert(self, entries: Iterable[Entry]) -> None:
        for entry in entries:
            if entry.identity in self._by_identity:
                continue
            idx = bisect.bisect_right(self._entries, title_key(entry), key=title_key)
            self._entries.insert(idx, entry)
            self._by_identity[entry.identity] = entry

    def remove(self, entries: Iterable[Entry]) -> list[Entry]:
        """Remove entries sharing identity with the given ones

        Returns the entries that were actually removed from the collection.
        """
        removed = []
        for entry in list(entries):
            idx = self.index_of(entry.identity)
            if idx > -1:
                removed.append(self._entries.pop(idx))
                del self._by_identity[entry.identity]
        return removed

    def update(self, entries: Iterable[Entry]) -> list[Entry]:
        entries = list(entries)
        removed = self.remove(entries)
        self.insert(entries)
        return removed
