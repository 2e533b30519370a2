# tests/conftest.py
import itertools
from datetime import datetime, timezone

import pytest

from erf_client.adapters.system.clock import ManualClock

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
T0_UNIX = int(T0.timestamp())


class CountingIds:
    """Deterministic identifier source: id-0, id-1, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self._prefix = prefix
        self._counter = itertools.count()

    def new_id(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"


@pytest.fixture
def clock():
    return ManualClock(T0)


@pytest.fixture
def ids():
    return CountingIds()


@pytest.fixture
def token_path(tmp_path):
    return tmp_path / "token"
