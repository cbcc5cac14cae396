"""Shared test fixtures."""

from datetime import UTC, datetime, timedelta
from itertools import count

import pytest

from src.conversations.store import ConversationStore

START = datetime(2026, 3, 14, 18, 0, tzinfo=UTC)


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime = START) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def new_id():
    """Deterministic ID factory: id-1, id-2, ..."""
    counter = count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def store(clock: FakeClock, new_id) -> ConversationStore:
    """A seeded store with a frozen clock and predictable IDs."""
    return ConversationStore(clock=clock, new_id=new_id)


@pytest.fixture
def seed_id(store: ConversationStore) -> str:
    """ID of the seeded conversation."""
    return store.conversations[0].id


@pytest.fixture(autouse=True)
def _reset_store_singleton():
    ConversationStore._reset()
    yield
    ConversationStore._reset()
