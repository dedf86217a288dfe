"""Provision the Thoughts table in DynamoDB.

The table uses ``username`` as the partition key and ``createdAt`` as the
sort key, which makes a per-user query return posts in time order.

Example usages::

    # Create the table in the configured region.
    python -m scripts.create_thoughts_table

    # Create it against DynamoDB Local and block until it is ACTIVE.
    AWS_ENDPOINT_URL=http://localhost:8000 \
        python -m scripts.create_thoughts_table --wait
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from app.clients import StoreError, ThoughtsTableClient
from app.core.config import get_settings
from app.core.logging import configure_logging

EXIT_OK = 0
EXIT_STORE_ERROR = 4

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create the Thoughts table.")
    parser.add_argument(
        "--wait",
        action="store_true",
        help="Block until DynamoDB reports the table as existing.",
    )
    return parser


def create_table(client: ThoughtsTableClient, *, wait: bool = False) -> int:
    """Create the table through ``client`` and log the outcome."""
    try:
        description = client.create_table(wait=wait)
    except StoreError as exc:
        logger.error(
            "Unable to create table. Error JSON: %s",
            json.dumps(exc.to_dict(), indent=2),
        )
        return EXIT_STORE_ERROR
    logger.info(
        "Created table. Table description JSON: %s",
        json.dumps(description, indent=2, default=str),
    )
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)
    return create_table(ThoughtsTableClient(settings.aws), wait=args.wait)


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
