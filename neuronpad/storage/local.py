import os
import re
import tempfile
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from neuronpad.errors import StorageReadError, StorageWriteError
from neuronpad.storage.base import RecordStore

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class LocalRecordStore(RecordStore):
    """Local record store that keeps each record in its own JSON file."""

    def __init__(self, directory: str | Path | None = None) -> None:
        """Initialize LocalRecordStore.

        Args:
            directory: Directory holding one `<key>.json` file per record. Created on
                       the first write if it doesn't exist. If not provided, records
                       are kept in memory only.
        """
        self._directory = Path(directory) if directory else None
        self._records: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        """Get a record's value, or None if it has never been written."""
        if self._directory is None:
            return self._records.get(key)

        path = _record_path(self._directory, key)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(f"Could not read record {key}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        """Replace a record's value.

        The new value is written to a temporary file next to the record and moved
        into place, so readers see either the old or the new value.
        """
        if self._directory is None:
            self._records[key] = value
            return

        path = _record_path(self._directory, key)
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=path.parent, prefix=f".{key}.", delete=False
            ) as f:
                tmp_name = f.name
                f.write(value)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise StorageWriteError(f"Could not write record {key}: {e}") from e
        logger.debug(f"Wrote record {key} ({len(value)} chars)")

    def remove_item(self, key: str) -> None:
        """Remove a record. Removing a missing record is not an error."""
        if self._directory is None:
            self._records.pop(key, None)
            return

        try:
            _record_path(self._directory, key).unlink(missing_ok=True)
        except OSError as e:
            raise StorageWriteError(f"Could not remove record {key}: {e}") from e


def _record_path(directory: Path, key: str) -> Path:
    if not _KEY_PATTERN.match(key):
        raise ValueError(f"Invalid record key: {key!r}")
    return directory / f"{key}.json"
