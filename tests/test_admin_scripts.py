"""Tests for the table provisioning and seed loading scripts."""

from __future__ import annotations

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import json
from pathlib import Path

import pytest

from app.clients import StoreError
from scripts import create_thoughts_table, load_thoughts


class FlakyTable:
    """Fails writes for the usernames listed in ``failing``."""

    def __init__(self, failing: set[str] | None = None) -> None:
        self.failing = failing or set()
        self.written: list[dict] = []

    def put_thought(self, item: dict) -> dict:
        if item["username"] in self.failing:
            raise StoreError("Rate exceeded", code="ThrottlingException")
        self.written.append(item)
        return {}


class ProvisioningTable:
    def __init__(self, error: StoreError | None = None) -> None:
        self.error = error
        self.waited: bool | None = None

    def create_table(self, *, wait: bool = False) -> dict:
        self.waited = wait
        if self.error is not None:
            raise self.error
        return {"TableName": "Thoughts", "TableStatus": "CREATING"}


def _seed_records() -> list[dict]:
    return [
        {"username": "ada", "createdAt": 1, "thought": "first"},
        {"username": "bob", "createdAt": 2, "thought": "second"},
        {"username": "cy", "createdAt": 3, "thought": "third"},
    ]


def test_loader_keeps_seed_timestamps():
    table = FlakyTable()

    succeeded, failed = load_thoughts.load_thoughts(table, _seed_records())

    assert (succeeded, failed) == (3, 0)
    assert table.written == _seed_records()


def test_loader_continues_after_failed_record(caplog: pytest.LogCaptureFixture):
    table = FlakyTable(failing={"bob"})

    with caplog.at_level("ERROR"):
        succeeded, failed = load_thoughts.load_thoughts(table, _seed_records())

    assert (succeeded, failed) == (2, 1)
    assert [item["username"] for item in table.written] == ["ada", "cy"]
    assert "Unable to add thought bob" in caplog.text


def test_loader_drops_extra_seed_attributes():
    table = FlakyTable()
    record = {"username": "ada", "createdAt": 1, "thought": "t", "image": "x.png"}

    load_thoughts.load_thoughts(table, [record])

    assert table.written == [{"username": "ada", "createdAt": 1, "thought": "t"}]


def test_read_seed_file_rejects_non_array(tmp_path: Path):
    seed_file = tmp_path / "users.json"
    seed_file.write_text(json.dumps({"username": "ada"}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_thoughts.read_seed_file(seed_file)


def test_bundled_seed_file_is_well_formed():
    records = load_thoughts.read_seed_file(load_thoughts.DEFAULT_SEED_FILE)

    assert records
    for record in records:
        assert set(record) == {"username", "createdAt", "thought"}
        assert isinstance(record["createdAt"], int)


def test_main_reports_missing_seed_file(tmp_path: Path):
    exit_code = load_thoughts.main(["--seed-file", str(tmp_path / "missing.json")])

    assert exit_code == load_thoughts.EXIT_RUNTIME_ERROR


def test_main_reports_partial_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    seed_file = tmp_path / "users.json"
    seed_file.write_text(json.dumps(_seed_records()), encoding="utf-8")
    table = FlakyTable(failing={"cy"})
    monkeypatch.setattr(load_thoughts, "ThoughtsTableClient", lambda settings: table)

    exit_code = load_thoughts.main(["--seed-file", str(seed_file)])

    assert exit_code == load_thoughts.EXIT_PARTIAL_FAILURE
    assert len(table.written) == 2


def test_create_table_success():
    table = ProvisioningTable()

    assert create_thoughts_table.create_table(table, wait=True) == create_thoughts_table.EXIT_OK
    assert table.waited is True


def test_create_table_failure_is_logged(caplog: pytest.LogCaptureFixture):
    table = ProvisioningTable(
        error=StoreError("Table already exists: Thoughts", code="ResourceInUseException")
    )

    with caplog.at_level("ERROR"):
        exit_code = create_thoughts_table.create_table(table)

    assert exit_code == create_thoughts_table.EXIT_STORE_ERROR
    assert "ResourceInUseException" in caplog.text


def test_create_table_main_passes_wait_flag(monkeypatch: pytest.MonkeyPatch):
    table = ProvisioningTable()
    monkeypatch.setattr(
        create_thoughts_table, "ThoughtsTableClient", lambda settings: table
    )

    assert create_thoughts_table.main(["--wait"]) == create_thoughts_table.EXIT_OK
    assert table.waited is True
