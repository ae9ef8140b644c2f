"""Interface definitions for core components"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from ..models.entry import Entry


class CollectionStoreInterface(ABC):
    """Interface for collection persistence"""

    @abstractmethod
    def load(self) -> list[Entry]:
        """Load the full collection in on-disk order"""
        pass

    @abstractmethod
    def save(self, entries: list[Entry]) -> None:
        """Replace the persisted collection with ``entries``"""
        pass

    @abstractmethod
    def exists(self) -> bool:
        """Check whether a collection has been persisted yet"""
        pass


@runtime_checkable
class RandomSource(Protocol):
    """Source of uniformly distributed indices; ``random.Random`` satisfies it"""

    def randrange(self, stop: int) -> int: ...
