"""ConversationStore — in-memory state behind the conversation and suggestion screens."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING

from src.conversations.clipboard import MemoryClipboard
from src.conversations.models import Message, MessageSender, make_id
from src.conversations.seed import seed_conversations
from src.conversations.suggestions import sample_suggestions

if TYPE_CHECKING:
    from collections.abc import Callable

    from src.conversations.clipboard import Clipboard
    from src.conversations.models import Conversation, Suggestion, ToneProfile

logger = logging.getLogger(__name__)


class StoreField(StrEnum):
    """Published state a listener can be told about."""

    CONVERSATIONS = "conversations"
    SUGGESTIONS = "suggestions"
    SELECTION = "selection"
    CONTEXT = "context"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ConversationBinding:
    """Two-way accessor for one conversation, keyed by ID.

    ``get()`` always reads the store's current value; ``set()`` commits a
    replacement immediately.
    """

    def __init__(self, store: ConversationStore, conversation_id: str) -> None:
        self._store = store
        self._conversation_id = conversation_id

    @property
    def conversation_id(self) -> str:
        return self._conversation_id

    def get(self) -> Conversation | None:
        return self._store.conversation(self._conversation_id)

    def set(self, conversation: Conversation) -> None:
        if conversation.id != self._conversation_id:
            logger.warning(
                "Binding for %s ignored write of conversation %s",
                self._conversation_id,
                conversation.id,
            )
            return
        self._store._replace(conversation)

    @property
    def value(self) -> Conversation | None:
        return self.get()

    @value.setter
    def value(self, conversation: Conversation) -> None:
        self.set(conversation)


class ConversationStore:
    """Holds conversations, context notes and the displayed suggestions.

    Singleton accessed via ``ConversationStore.get()``.  Construct directly with
    explicit *conversations*, *clock* and *new_id* for test isolation.

    Every operation is synchronous and degrades to a no-op on bad input
    (unknown conversation ID, blank text) instead of raising.
    """

    _instance: ConversationStore | None = None

    def __init__(
        self,
        conversations: list[Conversation] | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
        new_id: Callable[[], str] | None = None,
        clipboard: Clipboard | None = None,
    ) -> None:
        self._clock = clock or _utcnow
        self._new_id = new_id or make_id
        self._clipboard = clipboard if clipboard is not None else MemoryClipboard()
        self._listeners: list[Callable[[StoreField], None]] = []

        if conversations is None:
            conversations = seed_conversations(self._clock(), self._new_id)

        seen: set[str] = set()
        for convo in conversations:
            if convo.id in seen:
                msg = f"Conversation '{convo.id}' appears more than once"
                raise ValueError(msg)
            seen.add(convo.id)

        self._conversations: list[Conversation] = list(conversations)
        self._selected_id: str | None = (
            self._conversations[0].id if self._conversations else None
        )
        self._context: dict[str, str] = {c.id: "" for c in self._conversations}
        self._suggestions: list[Suggestion] = self._build_suggestions(self._selected_id)
        logger.debug(
            "ConversationStore ready: %d conversation(s), selected=%s",
            len(self._conversations),
            self._selected_id,
        )

    @classmethod
    def get(cls) -> ConversationStore:
        """Return the shared ConversationStore instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def _reset(cls) -> None:
        """Reset the singleton (for testing)."""
        cls._instance = None

    # -- Published state -------------------------------------------------------

    @property
    def conversations(self) -> tuple[Conversation, ...]:
        return tuple(self._conversations)

    @property
    def suggestions(self) -> tuple[Suggestion, ...]:
        return tuple(self._suggestions)

    @property
    def selected_conversation_id(self) -> str | None:
        return self._selected_id

    @property
    def selected_conversation(self) -> Conversation | None:
        if self._selected_id is None:
            return None
        return self.conversation(self._selected_id)

    @selected_conversation.setter
    def selected_conversation(self, conversation: Conversation | None) -> None:
        if conversation is None:
            return
        self._replace(conversation)

    @property
    def clipboard(self) -> Clipboard:
        return self._clipboard

    def conversation(self, conversation_id: str) -> Conversation | None:
        """Look up a conversation by ID."""
        idx = self._index(conversation_id)
        return None if idx is None else self._conversations[idx]

    # -- Change notification ---------------------------------------------------

    def subscribe(self, listener: Callable[[StoreField], None]) -> Callable[[], None]:
        """Register *listener* for change notifications. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, field: StoreField) -> None:
        for listener in list(self._listeners):
            try:
                listener(field)
            except Exception:
                logger.exception("Store listener failed on %s change", field)

    # -- Internal helpers ------------------------------------------------------

    def _index(self, conversation_id: str | None) -> int | None:
        if conversation_id is None:
            return None
        for idx, convo in enumerate(self._conversations):
            if convo.id == conversation_id:
                return idx
        return None

    def _replace(self, conversation: Conversation) -> bool:
        idx = self._index(conversation.id)
        if idx is None:
            logger.debug("Ignoring write for unknown conversation %s", conversation.id)
            return False
        self._conversations[idx] = conversation
        self._publish(StoreField.CONVERSATIONS)
        return True

    def _build_suggestions(self, conversation_id: str | None) -> list[Suggestion]:
        convo = self.conversation(conversation_id) if conversation_id is not None else None
        if convo is None:
            return sample_suggestions("", None, new_id=self._new_id)
        return sample_suggestions(
            self.get_context(convo.id), convo.tone_profile, new_id=self._new_id
        )

    def _append_user_message(self, text: str, conversation_id: str | None) -> Message | None:
        target_id = conversation_id if conversation_id is not None else self._selected_id
        idx = self._index(target_id)
        if idx is None:
            logger.debug("No conversation resolved for message (requested=%s)", target_id)
            return None
        trimmed = text.strip()
        if not trimmed:
            return None

        message = Message(
            id=self._new_id(),
            sender=MessageSender.USER,
            text=trimmed,
            timestamp=self._clock(),
        )
        self._conversations[idx] = self._conversations[idx].with_message(message)
        self._publish(StoreField.CONVERSATIONS)
        return message

    # -- Operations ------------------------------------------------------------

    def select_conversation(self, conversation_id: str | None) -> None:
        """Select a conversation. The ID is not validated."""
        if conversation_id is not None and self._index(conversation_id) is None:
            logger.warning("Selecting unknown conversation %s", conversation_id)
        if conversation_id == self._selected_id:
            return
        self._selected_id = conversation_id
        self._publish(StoreField.SELECTION)

    def get_binding(self, conversation_id: str) -> ConversationBinding | None:
        """Return a live accessor for a conversation, or None if it doesn't exist."""
        if self._index(conversation_id) is None:
            return None
        return ConversationBinding(self, conversation_id)

    def send_message(self, text: str, conversation_id: str | None = None) -> Message | None:
        """Append a user message to the given (or selected) conversation.

        Blank text or an unresolvable conversation is a no-op returning None.
        """
        return self._append_user_message(text, conversation_id)

    def use_suggestion(self, text: str, conversation_id: str | None = None) -> Message | None:
        """Send suggestion text as the user's outgoing message."""
        return self._append_user_message(text, conversation_id)

    def copy_suggestion(self, suggestion: Suggestion) -> None:
        """Put a suggestion's text on the clipboard."""
        try:
            self._clipboard.copy(suggestion.text)
        except Exception:
            logger.exception("Clipboard copy failed for suggestion %s", suggestion.id)

    def set_context(self, text: str, conversation_id: str) -> None:
        """Store pasted context verbatim for a conversation."""
        if self._context.get(conversation_id) == text:
            return
        self._context[conversation_id] = text
        self._publish(StoreField.CONTEXT)

    def get_context(self, conversation_id: str) -> str:
        """Return the pasted context for a conversation ("" if none)."""
        return self._context.get(conversation_id, "")

    def update_tone(self, tone: ToneProfile, conversation_id: str) -> None:
        """Replace a conversation's tone profile. Unknown IDs are ignored."""
        idx = self._index(conversation_id)
        if idx is None:
            logger.debug("Ignoring tone update for unknown conversation %s", conversation_id)
            return
        convo = self._conversations[idx]
        self._conversations[idx] = convo.model_copy(update={"tone_profile": tone})
        logger.info("Tone for %s → %s", convo.person.name, tone.describe())
        self._publish(StoreField.CONVERSATIONS)

    def regenerate_suggestions(self, conversation_id: str | None = None) -> None:
        """Rebuild the displayed suggestions for the given (or selected) conversation.

        Falls back to context-free, tone-free suggestions when nothing resolves.
        """
        target_id = conversation_id if conversation_id is not None else self._selected_id
        self._suggestions = self._build_suggestions(target_id)
        self._publish(StoreField.SUGGESTIONS)
