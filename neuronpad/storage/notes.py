import threading
from typing import List

from loguru import logger
from pydantic import ValidationError

from neuronpad.categorizer import categorize
from neuronpad.domain.note import Note, NoteCollection, NoteDraft, now_ms
from neuronpad.errors import StorageReadError, StorageWriteError
from neuronpad.storage.base import RecordStore


class NoteStore:
    """Note collection persisted as a single JSON array record.

    Every mutation loads the whole collection, changes it and writes it back.
    New notes go to the front; updates keep their position.
    """

    def __init__(self, records: RecordStore, key: str = "neuronpad_notes") -> None:
        self._records = records
        self._key = key
        # Serializes load-mutate-store sequences within this process
        self._lock = threading.RLock()

    def get_all(self) -> List[Note]:
        """Load all notes, newest-created first.

        Missing or unreadable data yields an empty list rather than an error.
        """
        try:
            return self._load()
        except StorageReadError as e:
            logger.warning(f"Could not read notes, treating as empty: {e}")
            return []

    def get(self, note_id: str) -> Note | None:
        """Get a note by its ID."""
        for note in self.get_all():
            if note.id == note_id:
                return note
        return None

    def save(self, note: Note) -> None:
        """Add a new note at the front or replace an existing one in place.

        A note with blank title and content is not persisted.

        Raises:
            StorageWriteError: If the collection cannot be read back or written.
        """
        if note.is_blank():
            logger.debug(f"Discarding blank note {note.id}")
            return

        with self._lock:
            notes = self._load_for_write()
            for idx, existing in enumerate(notes):
                if existing.id == note.id:
                    notes[idx] = note
                    logger.debug(f"Updated note {note.id}")
                    break
            else:
                notes.insert(0, note)
                logger.debug(f"Added note {note.id}")
            self._write(notes)

    def save_draft(self, draft: NoteDraft) -> Note | None:
        """Persist an edited draft, recomputing its category and timestamps.

        Args:
            draft: The editor state to save

        Returns:
            The saved note, or None if the draft was blank and discarded
        """
        if draft.is_blank():
            logger.debug("Discarding blank draft")
            return None

        with self._lock:
            existing = self.get(draft.note_id) if draft.note_id else None
            note = draft.to_note(
                category=categorize(draft.title, draft.content),
                existing=existing,
                now=now_ms(),
            )
            self.save(note)
        return note

    def delete(self, note_id: str) -> None:
        """Delete a note. Deleting an unknown ID is a no-op.

        Raises:
            StorageWriteError: If the collection cannot be read back or written.
        """
        with self._lock:
            notes = self._load_for_write()
            remaining = [n for n in notes if n.id != note_id]
            if len(remaining) < len(notes):
                logger.debug(f"Deleted note {note_id}")
            self._write(remaining)

    def _write(self, notes: List[Note]) -> None:
        data = NoteCollection.dump_json(notes, by_alias=True).decode()
        self._records.set_item(self._key, data)

    def _load(self) -> List[Note]:
        data = self._records.get_item(self._key)
        if not data:
            return []
        try:
            return NoteCollection.validate_json(data)
        except ValidationError as e:
            raise StorageReadError(f"Stored notes are corrupt: {e.error_count()} errors") from e

    def _load_for_write(self) -> List[Note]:
        # An unreadable collection is never overwritten
        try:
            return self._load()
        except StorageReadError as e:
            raise StorageWriteError(f"Not writing notes, current collection unreadable: {e}") from e
