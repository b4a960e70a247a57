"""Filtered and searched views over an in-memory list of notes.

All functions are pure and keep the relative order of their input.
"""

from collections import Counter
from typing import Dict, Iterable, List

from neuronpad.domain.note import Category, Note

ALL = "All"

# Folders offered for browsing, in display order. ARCHIVE has no folder of its own.
FOLDERS: tuple[str, ...] = (
    ALL,
    Category.WORK.value,
    Category.PERSONAL.value,
    Category.IDEAS.value,
    Category.GENERAL.value,
)


def filter_by_category(notes: Iterable[Note], label: str | Category) -> List[Note]:
    """Keep notes with the given category. The label "All" keeps every note."""
    label = label.value if isinstance(label, Category) else label
    if label == ALL:
        return list(notes)
    return [note for note in notes if note.category.value == label]


def search(notes: Iterable[Note], query: str) -> List[Note]:
    """Keep notes whose title or content contains the query, ignoring case.

    A blank query keeps every note.
    """
    if not query.strip():
        return list(notes)
    q = query.lower()
    return [note for note in notes if q in note.title.lower() or q in note.content.lower()]


def filter_notes(notes: Iterable[Note], category: str | Category = ALL, query: str = "") -> List[Note]:
    """Apply the category filter and the search together."""
    return search(filter_by_category(notes, category), query)


def counts_by_category(notes: Iterable[Note]) -> Dict[Category, int]:
    """Count notes per category. Categories without notes are absent."""
    return dict(Counter(note.category for note in notes))


def folder_counts(notes: Iterable[Note]) -> Dict[str, int]:
    """Counts for every folder in FOLDERS, with "All" as the total of all notes."""
    counts = counts_by_category(notes)
    result = {folder: 0 for folder in FOLDERS}
    for category, count in counts.items():
        if category.value in result:
            result[category.value] = count
    result[ALL] = sum(counts.values())
    return result
