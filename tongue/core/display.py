"""Rendering of entries according to the display suppression flags"""

from dataclasses import dataclass
from enum import Enum

from ..logging_config import get_logger
from ..models.entry import Entry

logger = get_logger(__name__)


class DisplayMode(Enum):
    """Which side(s) of an entry are shown"""

    BOTH = "both"
    NATIVE_ONLY = "native"
    FOREIGN_ONLY = "foreign"


@dataclass(frozen=True)
class DisplayPolicy:
    """Formats entries for output"""

    mode: DisplayMode = DisplayMode.BOTH

    @classmethod
    def from_flags(cls, no_native: bool, no_foreign: bool) -> "DisplayPolicy":
        """Build a policy from --no-native / --no-foreign.

        When both are set, suppressing the native word wins and the entry
        is shown foreign-only.
        """
        if no_native:
            if no_foreign:
                logger.warning(
                    "--no-native and --no-foreign both set; ignoring --no-foreign"
                )
            return cls(DisplayMode.FOREIGN_ONLY)
        if no_foreign:
            return cls(DisplayMode.NATIVE_ONLY)
        return cls(DisplayMode.BOTH)

    def format_entry(self, entry: Entry) -> str:
        if self.mode is DisplayMode.FOREIGN_ONLY:
            return entry.foreign
        if self.mode is DisplayMode.NATIVE_ONLY:
            return entry.native
        return f"{entry.native} - {entry.foreign}"

    def format_listing(self, entries: list[Entry]) -> list[str]:
        """Render every entry with its 1-based index"""
        return [f"{i}: {self.format_entry(e)}" for i, e in enumerate(entries, 1)]
