"""Quick-apply tone presets and the tone editor's live preview."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from src.conversations.models import ToneProfile


class TonePreset(BaseModel):
    """A named tone profile offered as a one-tap choice."""

    model_config = ConfigDict(frozen=True)

    name: str
    profile: ToneProfile


def _preset(name: str, p: float, f: float, fw: float, e: float, fl: float) -> TonePreset:
    return TonePreset(
        name=name,
        profile=ToneProfile(
            playfulness=p, formality=f, forwardness=fw, expressiveness=e, flirtation=fl
        ),
    )


TONE_PRESETS: tuple[TonePreset, ...] = (
    _preset("Playful & Flirty", 8, 3, 7, 8, 8),
    _preset("Thoughtful & Deep", 3, 6, 4, 5, 2),
    _preset("Casual & Friendly", 5, 2, 5, 6, 4),
    _preset("Direct & Bold", 4, 5, 9, 7, 5),
    _preset("Professional & Warm", 3, 7, 5, 4, 1),
)


def find_preset(name: str) -> TonePreset | None:
    """Look up a preset by name, ignoring case and surrounding whitespace."""
    wanted = name.strip().casefold()
    for preset in TONE_PRESETS:
        if preset.name.casefold() == wanted:
            return preset
    return None


PREVIEW_PROMPT = "Let's do a hike this weekend?"


def preview_reply(tone: ToneProfile) -> str:
    """Sample answer to :data:`PREVIEW_PROMPT` for the tone being edited."""
    play = int(tone.playfulness)
    flirt = int(tone.flirtation)
    fwd = int(tone.forwardness)
    expr = int(tone.expressiveness)

    if play >= 7 and flirt >= 7 and fwd >= 6 and expr >= 6:
        return (
            "Love that idea—how about Saturday morning? "
            "I know a spot with a killer view, and coffee’s on me. 😄"
        )
    if 1 <= play <= 3 and 1 <= flirt <= 3 and 1 <= fwd <= 5 and 1 <= expr <= 4:
        return "That sounds nice. Which day works best for you?"
    if 4 <= play <= 6 and 4 <= flirt <= 6 and 4 <= fwd <= 7 and 4 <= expr <= 7:
        return "Weekend hike sounds great. I’m thinking Saturday—does that fit for you?"
    return "I’m in for a hike—what time suits you?"
