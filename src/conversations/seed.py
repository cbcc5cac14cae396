"""Seed conversation shown on first launch; doubles as the canonical test fixture."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from src.conversations.models import (
    Conversation,
    Message,
    MessageSender,
    Person,
    ToneProfile,
    make_id,
)

if TYPE_CHECKING:
    from collections.abc import Callable


def seed_conversations(
    now: datetime, new_id: Callable[[], str] | None = None
) -> list[Conversation]:
    """Build the seed data relative to *now*."""
    next_id = new_id or make_id
    person = Person(
        id=next_id(), name="Sarah", platform="Hinge", avatar_symbol="heart.circle.fill"
    )
    tone = ToneProfile(
        playfulness=7, formality=3, forwardness=6, expressiveness=7, flirtation=7
    )
    messages = (
        Message(
            id=next_id(),
            sender=MessageSender.OTHER,
            text="I love hiking! What's your favorite trail?",
            timestamp=now - timedelta(hours=1),
        ),
        Message(
            id=next_id(),
            sender=MessageSender.USER,
            text="Runyon Canyon is my usual go-to. Where do you hike?",
            timestamp=now - timedelta(minutes=30),
        ),
    )
    return [
        Conversation(
            id=next_id(),
            person=person,
            messages=messages,
            tone_profile=tone,
            needs_response=True,
            last_activity=now - timedelta(minutes=10),
            platform_badge="Hinge",
            unread_count=1,
            health_score=4,
        )
    ]
