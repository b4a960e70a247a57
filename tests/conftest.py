from pathlib import Path
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from neuronpad.api import create_app
from neuronpad.domain.note import Category, Note
from neuronpad.storage.local import LocalRecordStore
from neuronpad.storage.notes import NoteStore
from neuronpad.transform.base import TextGenerator, TransformKind
from neuronpad.transform.gateway import TransformGateway
from tests.fakes import FakeTextGenerator


@pytest.fixture
def make_note() -> Callable[..., Note]:
    """Factory for notes with sensible defaults."""

    def _make_note(
        note_id: str,
        title: str = "",
        content: str = "",
        category: Category = Category.GENERAL,
        created_at: int = 1_700_000_000_000,
        updated_at: int | None = None,
        **flags: bool,
    ) -> Note:
        return Note(
            id=note_id,
            title=title,
            content=content,
            category=category,
            created_at=created_at,
            updated_at=created_at if updated_at is None else updated_at,
            **flags,
        )

    return _make_note


@pytest.fixture
def test_notes(make_note: Callable[..., Note]) -> list[Note]:
    return [
        make_note("n1", "Q3 budget", "Prepare the budget for the client", Category.WORK),
        make_note("n2", "Groceries", "Milk, eggs and bread", Category.PERSONAL),
        make_note("n3", "App idea", "What if notes could talk? Budget permitting.", Category.IDEAS),
        make_note("n4", "Standup", "Team sync on the sprint", Category.WORK),
        make_note("n5", "Random", "Nothing in particular", Category.GENERAL),
    ]


@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def note_store(storage_dir: Path) -> NoteStore:
    return NoteStore(LocalRecordStore(storage_dir))


@pytest.fixture
def fake_generator() -> FakeTextGenerator:
    return FakeTextGenerator(
        results={
            TransformKind.SUMMARIZE: "A short summary.",
            TransformKind.GRAMMAR_FIX: "This sentence is correct.",
        }
    )


@pytest.fixture
def test_client(fake_generator: TextGenerator) -> TestClient:
    """Create test client with a fake text generator."""
    app = create_app(generator=fake_generator)
    return TestClient(app)


@pytest.fixture
def gateway(test_client: TestClient) -> TransformGateway:
    """Gateway that talks to the test app instead of a real server."""
    return TransformGateway(base_url="http://testserver", client=test_client)
