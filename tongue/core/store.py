"""JSON file persistence for the vocabulary collection.

The whole collection is read on every load and rewritten on every save.
Saves serialize first, write to a temporary sibling file and then
``os.replace`` it over the target, so the file on disk is always either
the previous collection or the new one.
"""

import os
import tempfile
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..exceptions import (
    CollectionNotFoundError,
    CollectionParseError,
    CollectionReadError,
    CollectionWriteError,
)
from ..logging_config import get_logger
from ..models.entry import Entry
from .interfaces import CollectionStoreInterface

logger = get_logger(__name__)

_COLLECTION_ADAPTER: TypeAdapter[list[Entry]] = TypeAdapter(list[Entry])


class JsonCollectionStore(CollectionStoreInterface):
    """Collection store backed by a single JSON array file"""

    def __init__(self, path: Path | str, indent: int | None = 2):
        self.path = Path(path)
        self.indent = indent or None

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> list[Entry]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError as e:
            raise CollectionNotFoundError(self.path) from e
        except OSError as e:
            raise CollectionReadError(self.path, e) from e

        # An empty collection may have been written as `null`
        if not raw.strip() or raw.strip() == b"null":
            logger.debug(f"{self.path} holds an empty collection")
            return []

        try:
            entries = _COLLECTION_ADAPTER.validate_json(raw)
        except ValidationError as e:
            raise CollectionParseError(self.path, _summarize(e)) from e

        logger.debug(f"Loaded {len(entries)} entries from {self.path}")
        return entries

    def save(self, entries: list[Entry]) -> None:
        try:
            content = _COLLECTION_ADAPTER.dump_json(
                entries, by_alias=True, indent=self.indent
            )
        except Exception as e:
            raise CollectionWriteError(self.path, e) from e

        directory = self.path.parent
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "wb",
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content + b"\n")
                tmp.flush()
                os.fsync(tmp.fileno())
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise CollectionWriteError(self.path, e) from e

        logger.debug(f"Saved {len(entries)} entries to {self.path}")

    def _file_mode(self) -> int:
        """Keep the mode of an existing file, otherwise honour the umask"""
        try:
            return self.path.stat().st_mode & 0o777
        except OSError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask


def _summarize(error: ValidationError) -> str:
    """Condense a pydantic validation error into one line"""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid data")
    extra = f" (+{error.error_count() - 1} more)" if error.error_count() > 1 else ""
    return f"{location}: {message}{extra}" if location else f"{message}{extra}"
