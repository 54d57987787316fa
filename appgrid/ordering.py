"""Display-name ordering of entries
"""
import locale


def title_key(entry) -> str:
    """Case-insensitive, locale-aware sort key for an entry's title"""
    return locale.strxfrm(entry.title.casefold())


def compare(a, b) -> int:
    key_a = title_key(a)
    key_b = title_key(b)
    return (key_a > key_b) - (key_a < key_b)
