"""ToneHone demo entry point.

Usage examples:
    # Seeded conversation and its suggestions
    python -m src.main

    # Paste the other person's latest message, then regenerate
    python -m src.main --context "Just got back from Runyon!"

    # Apply a preset before regenerating
    python -m src.main --preset "Direct & Bold"

    # Show the preset table with live previews
    python -m src.main --list-presets
"""

import argparse
import logging
from datetime import UTC, datetime

from src.config import settings
from src.conversations import TONE_PRESETS, ConversationStore, find_preset, preview_reply
from src.conversations.presets import PREVIEW_PROMPT

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
)
logger = logging.getLogger(__name__)


def _relative(when: datetime, now: datetime) -> str:
    minutes = int((now - when).total_seconds() // 60)
    if minutes < 1:
        return "now"
    if minutes < 60:
        return f"{minutes}m ago"
    return f"{minutes // 60}h ago"


def print_presets() -> None:
    """Print every preset with its compact label and preview reply."""
    print(f'Preview prompt: "{PREVIEW_PROMPT}"\n')
    for preset in TONE_PRESETS:
        print(f"{preset.name:<22} {preset.profile.describe()}")
        print(f"    → {preview_reply(preset.profile)}")


def print_store(store: ConversationStore) -> None:
    """Print the conversation list and the current suggestions."""
    now = datetime.now(UTC)
    for convo in store.conversations:
        marker = "*" if convo.id == store.selected_conversation_id else " "
        badges = [convo.platform_badge, f"Tone {convo.tone_profile.rounded()[0]}"]
        if convo.needs_response:
            badges.append("Needs reply")
        if convo.unread_count > 0:
            badges.append(str(convo.unread_count))
        print(
            f"{marker} {convo.person.name} [{' | '.join(badges)}] "
            f"{_relative(convo.last_activity, now)}"
        )
        for message in convo.messages:
            print(f"    {message.sender.value:>5}: {message.text}")
        context = store.get_context(convo.id)
        if context:
            print(f'    context: "{context}"')

    print("\nSuggestions:")
    for suggestion in store.suggestions:
        print(f"  [{suggestion.variant.value:<8}] {suggestion.match_score:>3}  {suggestion.text}")
        print(f"             {suggestion.rationale}")


def main(argv: list[str] | None = None) -> None:
    """Build a seeded store, apply the requested changes and print it."""
    parser = argparse.ArgumentParser(description="ToneHone conversation demo")
    parser.add_argument("--context", help="Pasted message to tune suggestions against")
    parser.add_argument("--preset", default=settings.default_preset, help="Tone preset name")
    parser.add_argument("--list-presets", action="store_true", help="Show presets and exit")
    args = parser.parse_args(argv)

    if args.list_presets:
        print_presets()
        return

    store = ConversationStore.get()
    convo = store.selected_conversation
    if convo is None:
        logger.warning("No conversation selected")
        print_store(store)
        return

    if args.preset:
        preset = find_preset(args.preset)
        if preset is None:
            names = ", ".join(p.name for p in TONE_PRESETS)
            parser.error(f"unknown preset {args.preset!r} (choose from: {names})")
        low, high = settings.tone_range()
        store.update_tone(preset.profile.clamped(low, high), convo.id)

    if args.context is not None:
        store.set_context(args.context, convo.id)

    store.regenerate_suggestions(convo.id)
    print_store(store)


if __name__ == "__main__":
    main()
