"""Keyword-based categorization of note text."""

from loguru import logger

from neuronpad.domain.note import Category

# Lower-case terms; a keyword scores at most once however often it appears
CATEGORY_KEYWORDS: dict[Category, tuple[str, ...]] = {
    Category.WORK: (
        "meeting",
        "project",
        "deadline",
        "client",
        "report",
        "task",
        "budget",
        "presentation",
        "email",
        "schedule",
        "office",
        "team",
        "manager",
        "sprint",
        "review",
        "agenda",
    ),
    Category.IDEAS: (
        "idea",
        "brainstorm",
        "concept",
        "what if",
        "maybe",
        "innovation",
        "creative",
        "inspiration",
        "design",
        "prototype",
        "experiment",
        "explore",
    ),
    Category.PERSONAL: (
        "grocery",
        "shopping",
        "birthday",
        "family",
        "vacation",
        "recipe",
        "workout",
        "doctor",
        "appointment",
        "hobby",
        "travel",
        "home",
        "personal",
    ),
}


def category_scores(title: str, content: str) -> dict[Category, int]:
    """Count the distinct keywords of each category found in the note text.

    Matching is substring based on the lower-cased text, so "idea" also
    matches inside "ideas".
    """
    text = f"{title} {content}".lower()
    return {
        category: sum(1 for keyword in keywords if keyword in text)
        for category, keywords in CATEGORY_KEYWORDS.items()
    }


def categorize(title: str, content: str) -> Category:
    """Categorize a note from its title and content.

    Returns the category whose score is strictly greater than every other
    score. Ties, including all-zero scores, resolve to GENERAL.

    Args:
        title: Note title
        content: Note body

    Returns:
        WORK, IDEAS, PERSONAL or GENERAL
    """
    scores = category_scores(title, content)
    for category, score in scores.items():
        others = [s for c, s in scores.items() if c is not category]
        if all(score > other for other in others):
            logger.debug(f"Categorized note as {category.value} (scores: {_fmt(scores)})")
            return category

    logger.debug(f"No unique top score ({_fmt(scores)}), using {Category.GENERAL.value}")
    return Category.GENERAL


def _fmt(scores: dict[Category, int]) -> str:
    return ", ".join(f"{c.value}={s}" for c, s in scores.items())
