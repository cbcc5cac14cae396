"""Canned reply suggestions annotated with the active tone and pasted context.

Only the rationale reflects tone and context; text, score and variant are
fixed per template.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.conversations.models import Suggestion, SuggestionVariant, make_id

if TYPE_CHECKING:
    from collections.abc import Callable

    from src.conversations.models import ToneProfile

# (text, match score, base rationale, variant)
TEMPLATES: tuple[tuple[str, int, str, SuggestionVariant], ...] = (
    (
        "That's awesome! I usually do Runyon Canyon—are you more of a sunrise or afternoon hiker?",
        95,
        "Builds on hiking, matches playful tone, invites engagement.",
        SuggestionVariant.QUESTION,
    ),
    (
        "Love that. We should hit a trail together this week—I've got a spot with a great view.",
        84,
        "More forward, suggests a plan.",
        SuggestionVariant.BOLD,
    ),
    (
        "Hiking sounds perfect. What kind of terrain do you enjoy most?",
        90,
        "Keeps conversation moving, invites them to share preference.",
        SuggestionVariant.SAFE,
    ),
    (
        "Teach me your favorite trail—I’ll bring the coffee.",
        92,
        "Playful promise, light escalation.",
        SuggestionVariant.PLAYFUL,
    ),
)


def rationale_suffix(context: str, tone: ToneProfile | None) -> str:
    """Build the context and tone annotations appended to every rationale."""
    suffix = ""
    if context:
        suffix += f' Based on: "{context}"'
    if tone is not None:
        suffix += f" {tone.hint()}"
    return suffix


def sample_suggestions(
    context: str,
    tone: ToneProfile | None,
    *,
    new_id: Callable[[], str] | None = None,
) -> list[Suggestion]:
    """Produce the four template suggestions for *context* and *tone*.

    Every call assigns fresh IDs; everything else is a pure function of the
    arguments.
    """
    next_id = new_id or make_id
    suffix = rationale_suffix(context, tone)
    return [
        Suggestion(
            id=next_id(),
            text=text,
            match_score=score,
            rationale=f"{rationale}{suffix}",
            variant=variant,
        )
        for text, score, rationale, variant in TEMPLATES
    ]
