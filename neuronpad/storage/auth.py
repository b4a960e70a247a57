from loguru import logger

from neuronpad.errors import StorageReadError
from neuronpad.storage.base import RecordStore


class AuthFlagStore:
    """Remembers whether the user has previously passed the unlock prompt."""

    def __init__(self, records: RecordStore, key: str = "neuronpad_auth") -> None:
        self._records = records
        self._key = key

    def mark_passed(self) -> None:
        self._records.set_item(self._key, "true")

    def has_passed(self) -> bool:
        try:
            return self._records.get_item(self._key) == "true"
        except StorageReadError as e:
            logger.warning(f"Could not read auth flag: {e}")
            return False

    def clear(self) -> None:
        self._records.remove_item(self._key)
