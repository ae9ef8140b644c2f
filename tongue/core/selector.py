"""Read-only lookups over a collection"""

from ..exceptions import EmptyCollectionError, IndexOutOfRangeError
from ..models.entry import Entry
from .interfaces import RandomSource


def select_by_index(entries: list[Entry], index: int) -> Entry:
    """Return the entry at 1-based ``index``.

    Raises:
        IndexOutOfRangeError: if ``index`` is outside ``[1, len(entries)]``
    """
    count = len(entries)
    if index < 1 or index > count:
        raise IndexOutOfRangeError(index, count)
    return entries[index - 1]


def find_by_native(entries: list[Entry], text: str) -> list[str]:
    """Foreign terms of every entry whose native term equals ``text``"""
    return [entry.foreign for entry in entries if entry.native == text]


def find_by_foreign(entries: list[Entry], text: str) -> list[str]:
    """Native terms of every entry whose foreign term equals ``text``"""
    return [entry.native for entry in entries if entry.foreign == text]


def select_random(entries: list[Entry], random_source: RandomSource) -> Entry:
    """Pick one entry uniformly at random"""
    if not entries:
        raise EmptyCollectionError()
    return entries[random_source.randrange(len(entries))]
