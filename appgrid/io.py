"""Reading entry lists from disk
"""
import logging

import pydantic

from appgrid.entry import Entry

logger = logging.getLogger(__name__)

_entry_list = pydantic.TypeAdapter(list[Entry])


def load_entries(path) -> list[Entry]:
    """Load a JSON array of entries

    Each item looks like
        {"component": "com.example/.Main", "title": "Example", "flags": ["system"]}
    where flags may also be an integer bitmask.
    """
    with open(path, "r", encoding="utf-8") as f:
        entries = _entry_list.validate_json(f.read())
    logger.debug("Loaded %d entries from %s", len(entries), path)
    return entries
