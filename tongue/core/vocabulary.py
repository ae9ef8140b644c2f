"""Mutations on the collection and the manager tying store and lookups together"""

import random

from ..exceptions import EntryValidationError
from ..logging_config import get_logger
from ..models.entry import Entry
from . import selector
from .interfaces import CollectionStoreInterface, RandomSource

logger = get_logger(__name__)


def add_entry(entries: list[Entry], native: str, foreign: str) -> list[Entry]:
    """Return a new collection with ``native``/``foreign`` appended.

    Raises:
        EntryValidationError: if either term is empty or only whitespace
    """
    for field, value in (("native", native), ("foreign", foreign)):
        if not value or not value.strip():
            raise EntryValidationError(field, value, "term cannot be empty")
    return [*entries, Entry(native=native, foreign=foreign)]


def delete_entry(
    entries: list[Entry], native: str
) -> tuple[list[Entry], Entry | None]:
    """Remove the first entry whose native term equals ``native``.

    Only the lowest-index match is removed; later duplicates stay. A term
    that is not present is not an error: the collection comes back
    unchanged together with ``None``.
    """
    for i, entry in enumerate(entries):
        if entry.native == native:
            return entries[:i] + entries[i + 1 :], entry
    return list(entries), None


class VocabularyManager:
    """Runs one load / operate / save cycle per call against a store"""

    def __init__(
        self,
        store: CollectionStoreInterface,
        random_source: RandomSource | None = None,
    ):
        self.store = store
        self.random_source: RandomSource = (
            random_source if random_source is not None else random.Random()
        )

    def entries(self) -> list[Entry]:
        return self.store.load()

    def add(self, native: str, foreign: str) -> bool:
        """Append an entry and persist it.

        A missing collection file is treated as empty.

        Returns:
            True if the collection file was created by this call
        """
        created = not self.store.exists()
        entries = [] if created else self.store.load()

        entries = add_entry(entries, native, foreign)
        self.store.save(entries)
        logger.debug(f"Added '{native}' - '{foreign}' as entry {len(entries)}")
        return created

    def delete(self, native: str) -> Entry | None:
        """Delete the first entry with this native term; no write if none matches"""
        entries, removed = delete_entry(self.store.load(), native)
        if removed is None:
            logger.info(f"No entry with native word '{native}'; nothing deleted")
            return None
        self.store.save(entries)
        logger.debug(f"Deleted '{removed.native}' - '{removed.foreign}'")
        return removed

    def entry_at(self, index: int) -> Entry:
        return selector.select_by_index(self.store.load(), index)

    def lookup_native(self, text: str) -> list[str]:
        return selector.find_by_native(self.store.load(), text)

    def lookup_foreign(self, text: str) -> list[str]:
        return selector.find_by_foreign(self.store.load(), text)

    def random_entry(self) -> Entry:
        return selector.select_random(self.store.load(), self.random_source)
