"""Load seed thoughts into the Thoughts table.

The seed file is a JSON array of ``{"username", "createdAt", "thought"}``
records. Each record is written independently: a failed write is logged and
the loader moves on to the next one.

Example usage::

    python -m scripts.load_thoughts --seed-file seed/users.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable

from app.clients import StoreError, ThoughtsTableClient
from app.core.config import get_settings
from app.core.logging import configure_logging

EXIT_OK = 0
EXIT_RUNTIME_ERROR = 5
EXIT_PARTIAL_FAILURE = 6

DEFAULT_SEED_FILE = Path(__file__).resolve().parents[1] / "seed" / "users.json"

logger = logging.getLogger(__name__)


def read_seed_file(path: Path) -> list[dict[str, Any]]:
    """Parse the seed fixture."""
    records = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(records, list):
        raise ValueError(f"Seed file {path} must contain a JSON array.")
    return records


def load_thoughts(
    client: ThoughtsTableClient, records: Iterable[dict[str, Any]]
) -> tuple[int, int]:
    """Write every record and return ``(succeeded, failed)`` counts."""
    succeeded = failed = 0
    for record in records:
        item = {
            "username": record["username"],
            "createdAt": record["createdAt"],
            "thought": record["thought"],
        }
        try:
            client.put_thought(item)
        except StoreError as exc:
            failed += 1
            logger.error(
                "Unable to add thought %s. Error JSON: %s",
                item["username"],
                json.dumps(exc.to_dict(), indent=2),
            )
            continue
        succeeded += 1
        logger.info("PutItem succeeded: %s", item["username"])
    return succeeded, failed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Import seed thoughts into DynamoDB.")
    parser.add_argument(
        "--seed-file",
        default=DEFAULT_SEED_FILE,
        type=Path,
        help="Path to the JSON seed file (default: seed/users.json).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        records = read_seed_file(args.seed_file)
    except (OSError, ValueError) as exc:
        logger.error("Unable to read seed file: %s", exc)
        return EXIT_RUNTIME_ERROR

    logger.info("Importing thoughts into DynamoDB. Please wait.")
    succeeded, failed = load_thoughts(ThoughtsTableClient(settings.aws), records)
    logger.info("Imported %d thought(s), %d failed.", succeeded, failed)
    return EXIT_PARTIAL_FAILURE if failed else EXIT_OK


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
