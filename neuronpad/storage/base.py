from typing import Optional, Protocol


class RecordStore(Protocol):
    """Protocol for named-record storage implementations.

    Each record is a single string value that is read and replaced as a unit.
    """

    def get_item(self, key: str) -> Optional[str]:
        """Get a record's value, or None if it has never been written.

        Raises:
            StorageReadError: If the record exists but cannot be read.
        """
        ...

    def set_item(self, key: str, value: str) -> None:
        """Replace a record's value.

        Raises:
            StorageWriteError: If the record cannot be written.
        """
        ...

    def remove_item(self, key: str) -> None:
        """Remove a record. Removing a missing record is not an error."""
        ...
