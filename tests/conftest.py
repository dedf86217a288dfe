"""Pytest configuration shared across the suite."""

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

from decimal import Decimal
from itertools import count

import pytest

from app.clients import StoreError
from app.core.config import AWSSettings


class InMemoryThoughtsTable:
    """Mimics the Thoughts table: composite key, descending per-user queries."""

    _PROJECTED = ("username", "thought", "createdAt", "image")

    def __init__(self) -> None:
        self.items: dict[tuple[str, int], dict] = {}
        self.error: StoreError | None = None

    def _raise_if_failing(self) -> None:
        if self.error is not None:
            raise self.error

    def scan_thoughts(self) -> list[dict]:
        self._raise_if_failing()
        return [self._as_stored(item) for item in self.items.values()]

    def query_thoughts(self, username: str) -> list[dict]:
        self._raise_if_failing()
        matches = [item for (user, _), item in self.items.items() if user == username]
        matches.sort(key=lambda item: item["createdAt"], reverse=True)
        return [
            {
                name: value
                for name, value in self._as_stored(item).items()
                if name in self._PROJECTED
            }
            for item in matches
        ]

    def put_thought(self, item: dict) -> dict:
        self._raise_if_failing()
        self.items[(item["username"], item["createdAt"])] = dict(item)
        return {"ResponseMetadata": {"HTTPStatusCode": 200}}

    @staticmethod
    def _as_stored(item: dict) -> dict:
        # boto3 hands numbers back as Decimal.
        stored = dict(item)
        stored["createdAt"] = Decimal(stored["createdAt"])
        return stored


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO-powered tests to run against asyncio backend only."""
    return "asyncio"


@pytest.fixture
def thoughts_table() -> InMemoryThoughtsTable:
    return InMemoryThoughtsTable()


@pytest.fixture
def ticking_clock():
    """Clock returning strictly increasing epoch milliseconds."""
    ticks = count(1_700_000_000_000, 1000)
    return lambda: next(ticks)


@pytest.fixture
def aws_settings() -> AWSSettings:
    return AWSSettings(
        AWS_REGION="us-east-2",
        THOUGHTS_TABLE_NAME="Thoughts",
        IMAGES_BUCKET_NAME="user-images-test",
    )
