"""Tests for conversation data models."""

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from src.conversations.models import (
    Conversation,
    Message,
    MessageSender,
    Person,
    SuggestionVariant,
    ToneProfile,
    make_id,
)

NOW = datetime(2026, 3, 14, 18, 0, tzinfo=UTC)


def _tone(p=7, f=3, fw=6, e=7, fl=7) -> ToneProfile:
    return ToneProfile(playfulness=p, formality=f, forwardness=fw, expressiveness=e, flirtation=fl)


def _conversation(**overrides) -> Conversation:
    fields = {
        "id": "c1",
        "person": Person(id="p1", name="Sarah", platform="Hinge"),
        "tone_profile": _tone(),
        "needs_response": True,
        "last_activity": NOW - timedelta(minutes=10),
    }
    fields.update(overrides)
    return Conversation(**fields)


# -- ToneProfile -------------------------------------------------------------


def test_tone_hint_format() -> None:
    assert _tone().hint() == "Tone: P7/F3/Fw6/E7/Fl7."


def test_tone_hint_rounds_to_nearest() -> None:
    tone = _tone(p=6.6, f=3.4, fw=5.5, e=7.49, fl=0.5)
    assert tone.rounded() == (7, 3, 6, 7, 1)
    assert tone.hint() == "Tone: P7/F3/Fw6/E7/Fl1."


def test_tone_describe() -> None:
    assert _tone().describe() == "P7 F3 Fw6 E7 Fl7"


def test_tone_as_tuple_order() -> None:
    assert _tone(1, 2, 3, 4, 5).as_tuple() == (1, 2, 3, 4, 5)


def test_tone_clamped() -> None:
    tone = _tone(p=12, f=0, fw=5, e=-3, fl=10)
    assert tone.clamped(1, 10).as_tuple() == (10, 1, 5, 1, 10)
    # Original untouched
    assert tone.playfulness == 12


def test_tone_out_of_range_accepted() -> None:
    """The model does not enforce slider bounds."""
    assert _tone(p=42).playfulness == 42


def test_tone_is_frozen() -> None:
    tone = _tone()
    with pytest.raises(ValidationError):
        tone.playfulness = 1


# -- Enums -------------------------------------------------------------------


def test_message_sender_values() -> None:
    assert [s.value for s in MessageSender] == ["user", "other", "ai"]


def test_suggestion_variant_values() -> None:
    assert {v.value for v in SuggestionVariant} == {
        "safe",
        "bold",
        "playful",
        "question",
        "statement",
    }


# -- Conversation ------------------------------------------------------------


def test_last_message_empty() -> None:
    assert _conversation().last_message is None


def test_with_message_appends_and_clears_needs_response() -> None:
    convo = _conversation()
    msg = Message(id="m1", sender=MessageSender.USER, text="hey", timestamp=NOW)

    updated = convo.with_message(msg)

    assert updated.messages == (msg,)
    assert updated.last_message is msg
    assert updated.last_activity == NOW
    assert updated.needs_response is False
    # Original untouched
    assert convo.messages == ()
    assert convo.needs_response is True


def test_with_message_preserves_order() -> None:
    first = Message(id="m1", sender=MessageSender.OTHER, text="a", timestamp=NOW)
    second = Message(id="m2", sender=MessageSender.USER, text="b", timestamp=NOW)
    convo = _conversation().with_message(first).with_message(second)
    assert [m.id for m in convo.messages] == ["m1", "m2"]


def test_make_id_unique() -> None:
    ids = {make_id() for _ in range(100)}
    assert len(ids) == 100
