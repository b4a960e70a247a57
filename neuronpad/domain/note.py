"""Note domain models."""

import time
import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict, TypeAdapter, model_validator
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    """Fixed category labels. ARCHIVE is never assigned by the categorizer."""

    WORK = "Work"
    PERSONAL = "Personal"
    IDEAS = "Ideas"
    GENERAL = "General"
    ARCHIVE = "Archive"


def new_note_id() -> str:
    """Return a new note ID: a random (UUID4) identifier in canonical string form."""
    return str(uuid.uuid4())


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


class Note(BaseModel):
    """Represents a persisted note.

    Attributes:
        id: Unique identifier, immutable after creation
        title: Plain text title, may be empty
        content: Plain text body, may be empty
        category: Category assigned by the categorizer on the last save
        created_at: Creation timestamp (milliseconds since epoch)
        updated_at: Last save timestamp (milliseconds since epoch)
        is_bold: Whole-note bold toggle
        is_italic: Whole-note italic toggle
        has_bullets: Whole-note bullet list toggle
        has_highlight: Whole-note highlight toggle
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str = ""
    content: str = ""
    category: Category = Category.GENERAL
    created_at: int
    updated_at: int
    is_bold: bool = False
    is_italic: bool = False
    has_bullets: bool = False
    has_highlight: bool = False

    @model_validator(mode="after")
    def _check_timestamps(self) -> "Note":
        if self.created_at > self.updated_at:
            raise ValueError("createdAt must not be later than updatedAt")
        return self

    def is_blank(self) -> bool:
        return not self.title.strip() and not self.content.strip()


# Serialized form of the whole collection: a JSON array of camelCase note objects
NoteCollection = TypeAdapter(list[Note])


class NoteDraft(BaseModel):
    """An unsaved edit of a new or existing note."""

    note_id: str | None = None  # None for a note that has never been saved
    title: str = ""
    content: str = ""
    is_bold: bool = False
    is_italic: bool = False
    has_bullets: bool = False
    has_highlight: bool = False

    @classmethod
    def from_note(cls, note: Note) -> "NoteDraft":
        return cls(
            note_id=note.id,
            title=note.title,
            content=note.content,
            is_bold=note.is_bold,
            is_italic=note.is_italic,
            has_bullets=note.has_bullets,
            has_highlight=note.has_highlight,
        )

    def is_blank(self) -> bool:
        return not self.title.strip() and not self.content.strip()

    def to_note(self, *, category: Category, existing: Note | None, now: int) -> Note:
        """Build the record to persist, keeping the creation time of an existing note."""
        return Note(
            id=existing.id if existing else (self.note_id or new_note_id()),
            title=self.title.strip(),
            content=self.content.strip(),
            category=category,
            created_at=existing.created_at if existing else now,
            updated_at=max(now, existing.created_at) if existing else now,
            is_bold=self.is_bold,
            is_italic=self.is_italic,
            has_bullets=self.has_bullets,
            has_highlight=self.has_highlight,
        )
