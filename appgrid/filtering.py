"""
Projection of the sorted collection through the active app filter.

A selector is either ALL_APPS or a bitmask of AppFlags. An entry is shown when
the selector is ALL_APPS or when its flags share at least one bit with the
selector.
"""
from typing import Iterable, Sequence

from appgrid.entry import AppFlags, Entry

ALL_APPS = -1


def matches(entry: Entry, selector: int) -> bool:
    return selector == ALL_APPS or (entry.flags & selector) != 0


def project(entries: Sequence[Entry], selector: int) -> Sequence[Entry]:
    """Return the entries visible under selector, in collection order

    With ALL_APPS the input sequence is returned as is, not copied.
    """
    if selector == ALL_APPS:
        return entries
    return [entry for entry in entries if (entry.flags & selector) != 0]


def parse_selector(names: Iterable[str]) -> int:
    names = list(names)
    if not names:
        return ALL_APPS
    return int(AppFlags.from_names(names))


def describe_selector(selector: int) -> str:
    if selector == ALL_APPS:
        return "all"
    return "|".join(flag.name.lower() for flag in AppFlags if flag & selector) or "none"
