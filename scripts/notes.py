"""CLI for creating, browsing and transforming notes in the local note store"""

import argparse
import sys
from datetime import datetime
from typing import List, Sequence

from loguru import logger

from neuronpad.config import settings
from neuronpad.domain.note import Category, Note, NoteDraft
from neuronpad.errors import StorageWriteError, TransformError
from neuronpad.query import ALL, FOLDERS, filter_notes, folder_counts
from neuronpad.storage.local import LocalRecordStore
from neuronpad.storage.notes import NoteStore
from neuronpad.transform.base import TransformKind
from neuronpad.transform.gateway import TransformGateway

STYLE_FLAGS = ("is_bold", "is_italic", "has_bullets", "has_highlight")


def format_note_line(note: Note) -> str:
    title = note.title or "(untitled)"
    return f"{note.id}  [{note.category.value}]  {title}"


def format_note(note: Note) -> str:
    styles = [flag for flag in STYLE_FLAGS if getattr(note, flag)]
    updated = datetime.fromtimestamp(note.updated_at / 1000).strftime("%Y-%m-%d %H:%M")
    lines = [
        f"# {note.title or '(untitled)'}",
        f"id: {note.id}",
        f"category: {note.category.value}",
        f"updated: {updated}",
    ]
    if styles:
        lines.append(f"style: {', '.join(styles)}")
    lines.extend(["", note.content])
    return "\n".join(lines)


def _add_style_arguments(parser: argparse.ArgumentParser, default: bool | None) -> None:
    for option, flag in zip(("--bold", "--italic", "--bullets", "--highlight"), STYLE_FLAGS):
        parser.add_argument(
            option, dest=flag, action=argparse.BooleanOptionalAction, default=default
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="NeuronPad notes")
    parser.add_argument(
        "--storage-dir",
        type=str,
        default=settings.local_storage_dir,
        help="Directory holding the note records",
    )
    parser.add_argument(
        "--api-url",
        type=str,
        default=settings.api_base_url,
        help="NeuronPad server used for summarize and grammar",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    add = commands.add_parser("add", help="Create a note")
    add.add_argument("--title", type=str, default="")
    add.add_argument("--content", type=str, default="")
    _add_style_arguments(add, default=False)

    edit = commands.add_parser("edit", help="Edit a note; omitted fields are kept")
    edit.add_argument("note_id")
    edit.add_argument("--title", type=str, default=None)
    edit.add_argument("--content", type=str, default=None)
    _add_style_arguments(edit, default=None)

    list_ = commands.add_parser("list", help="List notes, newest first")
    list_.add_argument(
        "--category", type=str, default=ALL, choices=(*FOLDERS, Category.ARCHIVE.value)
    )
    list_.add_argument("--search", type=str, default="")

    show = commands.add_parser("show", help="Print a note")
    show.add_argument("note_id")

    delete = commands.add_parser("delete", help="Delete a note")
    delete.add_argument("note_id")

    commands.add_parser("folders", help="Count notes per folder")

    for kind, help_text in (
        (TransformKind.SUMMARIZE, "Summarize a note"),
        (TransformKind.GRAMMAR_FIX, "Fix the grammar of a note"),
    ):
        transform = commands.add_parser(kind.value, help=help_text)
        transform.add_argument("note_id")
        transform.add_argument(
            "--apply", action="store_true", help="Replace the note content with the result"
        )

    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    store: NoteStore | None = None,
    gateway: TransformGateway | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    store = store or NoteStore(
        LocalRecordStore(args.storage_dir), key=settings.notes_record_key
    )

    try:
        if args.command == "add":
            draft = NoteDraft(
                title=args.title,
                content=args.content,
                **{flag: getattr(args, flag) for flag in STYLE_FLAGS},
            )
            return _print_saved(store.save_draft(draft))

        if args.command == "list":
            notes: List[Note] = filter_notes(store.get_all(), args.category, args.search)
            for note in notes:
                print(format_note_line(note))
            return 0

        if args.command == "folders":
            for folder, count in folder_counts(store.get_all()).items():
                print(f"{folder}: {count}")
            return 0

        note = store.get(args.note_id)
        if note is None:
            print(f"Note not found: {args.note_id}", file=sys.stderr)
            return 1

        if args.command == "show":
            print(format_note(note))
            return 0

        if args.command == "delete":
            store.delete(note.id)
            print(f"Deleted {note.id}")
            return 0

        if args.command == "edit":
            updates = {
                name: getattr(args, name)
                for name in ("title", "content", *STYLE_FLAGS)
                if getattr(args, name) is not None
            }
            draft = NoteDraft.from_note(note).model_copy(update=updates)
            return _print_saved(store.save_draft(draft))

        gateway = gateway or TransformGateway(args.api_url)
        result = gateway.transform(TransformKind(args.command), note.content)
        print(result)
        if args.apply:
            draft = NoteDraft.from_note(note).model_copy(update={"content": result})
            store.save_draft(draft)
        return 0

    except TransformError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except StorageWriteError as e:
        logger.error(f"Could not save notes: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _print_saved(note: Note | None) -> int:
    if note is None:
        print("Nothing to save: title and content are empty")
        return 0
    print(format_note_line(note))
    return 0


if __name__ == "__main__":
    logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])
    sys.exit(main())
