"""Shared fixtures for the expense ledger tests."""

import pytest

from src.config import Settings
from src.ledger import EntryIdGenerator, LedgerStore
from src.services.storage import InMemoryKeyValueStore


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def storage():
    return InMemoryKeyValueStore()


@pytest.fixture
def store(storage, clock):
    ledger = LedgerStore(
        storage,
        settings=Settings(),
        id_generator=EntryIdGenerator(clock=clock),
    )
    ledger.load()
    return ledger
