"""Data models for conversations, tone profiles and reply suggestions."""

from __future__ import annotations

import math
import uuid
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


def make_id() -> str:
    """Generate a new entity ID."""
    return uuid.uuid4().hex


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class MessageSender(StrEnum):
    USER = "user"
    OTHER = "other"
    AI = "ai"


class SuggestionVariant(StrEnum):
    SAFE = "safe"
    BOLD = "bold"
    PLAYFUL = "playful"
    QUESTION = "question"
    STATEMENT = "statement"


class Person(BaseModel):
    """The other party in a conversation."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    platform: str
    avatar_symbol: str = "person.circle.fill"


class Message(BaseModel):
    """A single message in a conversation thread."""

    model_config = ConfigDict(frozen=True)

    id: str
    sender: MessageSender
    text: str
    timestamp: datetime


class ToneProfile(BaseModel):
    """Five-dimension description of the desired reply style.

    Values are conventionally on a 1-10 scale, but nothing here enforces it;
    use :meth:`clamped` where slider bounds matter.
    """

    model_config = ConfigDict(frozen=True)

    playfulness: float
    formality: float
    forwardness: float
    expressiveness: float
    flirtation: float

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        """Return the dimensions in playfulness/formality/forwardness/expressiveness/flirtation order."""
        return (
            self.playfulness,
            self.formality,
            self.forwardness,
            self.expressiveness,
            self.flirtation,
        )

    def rounded(self) -> tuple[int, int, int, int, int]:
        """Return every dimension rounded to the nearest integer (halves round up)."""
        p, f, fw, e, fl = (_round_half_up(v) for v in self.as_tuple())
        return p, f, fw, e, fl

    def hint(self) -> str:
        """Rationale suffix, e.g. ``Tone: P7/F3/Fw6/E7/Fl7.``"""
        p, f, fw, e, fl = self.rounded()
        return f"Tone: P{p}/F{f}/Fw{fw}/E{e}/Fl{fl}."

    def describe(self) -> str:
        """Compact label, e.g. ``P7 F3 Fw6 E7 Fl7``."""
        p, f, fw, e, fl = self.rounded()
        return f"P{p} F{f} Fw{fw} E{e} Fl{fl}"

    def clamped(self, low: float, high: float) -> ToneProfile:
        """Return a copy with every dimension clamped to ``[low, high]``."""
        return ToneProfile(
            playfulness=min(max(self.playfulness, low), high),
            formality=min(max(self.formality, low), high),
            forwardness=min(max(self.forwardness, low), high),
            expressiveness=min(max(self.expressiveness, low), high),
            flirtation=min(max(self.flirtation, low), high),
        )


class Suggestion(BaseModel):
    """A candidate reply shown to the user."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    match_score: int  # 0-100, advisory only
    rationale: str
    variant: SuggestionVariant


class Conversation(BaseModel):
    """A thread between the user and one other person.

    Instances are immutable; build a changed copy with ``model_copy(update=...)``
    (or :meth:`with_message`) and commit it through the store.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    person: Person
    messages: tuple[Message, ...] = ()
    tone_profile: ToneProfile
    needs_response: bool = False
    last_activity: datetime
    platform_badge: str = ""
    unread_count: int = 0
    health_score: int = 0

    @property
    def last_message(self) -> Message | None:
        return self.messages[-1] if self.messages else None

    def with_message(self, message: Message) -> Conversation:
        """Return a copy with *message* appended and activity bookkeeping applied."""
        return self.model_copy(
            update={
                "messages": (*self.messages, message),
                "last_activity": message.timestamp,
                "needs_response": False,
            }
        )
