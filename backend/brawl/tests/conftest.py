import pytest

from brawl.session.history import HistoryStore
from brawl.session.match import Session
from brawl.tests.mocks import MemoryHistoryStorage


@pytest.fixture
def storage() -> MemoryHistoryStorage:
    return MemoryHistoryStorage()


@pytest.fixture
def history(storage) -> HistoryStore:
    return HistoryStore(storage)


@pytest.fixture
def session(history) -> Session:
    return Session(history, observer_name=lambda: "Na'talee Riverspear")
