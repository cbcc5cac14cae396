"""Conversation state, tone profiles and reply suggestions."""

from src.conversations.clipboard import Clipboard, MemoryClipboard
from src.conversations.models import (
    Conversation,
    Message,
    MessageSender,
    Person,
    Suggestion,
    SuggestionVariant,
    ToneProfile,
)
from src.conversations.presets import TONE_PRESETS, TonePreset, find_preset, preview_reply
from src.conversations.store import ConversationBinding, ConversationStore, StoreField
from src.conversations.suggestions import sample_suggestions

__all__ = [
    "TONE_PRESETS",
    "Clipboard",
    "Conversation",
    "ConversationBinding",
    "ConversationStore",
    "MemoryClipboard",
    "Message",
    "MessageSender",
    "Person",
    "StoreField",
    "Suggestion",
    "SuggestionVariant",
    "TonePreset",
    "ToneProfile",
    "find_preset",
    "preview_reply",
    "sample_suggestions",
]
