from enum import Enum
from typing import Protocol


class TransformKind(str, Enum):
    SUMMARIZE = "summarize"
    GRAMMAR_FIX = "grammar"


class TextGenerator(Protocol):
    def generate(self, kind: TransformKind, text: str) -> str:
        """Return the transformed text for the given kind of transformation."""
        ...


# HTTP route serving each kind of transformation
ROUTES: dict[TransformKind, str] = {
    TransformKind.SUMMARIZE: "/api/ai/summarize",
    TransformKind.GRAMMAR_FIX: "/api/ai/grammar",
}
