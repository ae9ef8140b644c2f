"""Factory functions for creating configured instances"""

from pathlib import Path

from ..config.settings import settings
from .interfaces import RandomSource
from .store import JsonCollectionStore
from .vocabulary import VocabularyManager


def create_vocabulary_manager(
    file: Path | str | None = None,
    indent: int | None = None,
    random_source: RandomSource | None = None,
) -> VocabularyManager:
    """Convenience function to create a manager for one collection file"""
    store = JsonCollectionStore(
        file if file is not None else settings.store.file,
        indent=indent if indent is not None else settings.store.indent,
    )
    return VocabularyManager(store, random_source=random_source)
