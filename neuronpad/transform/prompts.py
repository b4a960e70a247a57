from typing import NamedTuple

from neuronpad.transform.base import TransformKind


class PromptConfig(NamedTuple):
    template: str
    temperature: float
    max_output_tokens: int
    fallback: str


PROMPTS: dict[TransformKind, PromptConfig] = {
    TransformKind.SUMMARIZE: PromptConfig(
        template=(
            "Summarize the following text concisely, capturing the key points in a clear "
            "and organized manner. Return only the summary, no extra commentary.\n\n"
            "Text:\n{text}"
        ),
        temperature=0.3,
        max_output_tokens=500,
        fallback="Could not generate summary.",
    ),
    TransformKind.GRAMMAR_FIX: PromptConfig(
        template=(
            "Correct the grammar, spelling, and punctuation of the following text. Return "
            "ONLY the corrected text, preserving the original meaning and style. Do not add "
            "any explanations.\n\nText:\n{text}"
        ),
        temperature=0.2,
        max_output_tokens=1000,
        fallback="Could not correct grammar.",
    ),
}


def get_prompt(kind: TransformKind, text: str) -> str:
    return PROMPTS[kind].template.format(text=text)
