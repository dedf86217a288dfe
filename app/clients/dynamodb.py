"""
DynamoDB wrapper for the Thoughts table.

The table is keyed by ``username`` (partition) and ``createdAt`` (sort, epoch
milliseconds), so a query on one username comes back in time order without a
post-query sort.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

import boto3
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError

from app.clients.errors import StoreError
from app.core.config import AWSSettings

logger = logging.getLogger(__name__)

KEY_SCHEMA = [
    {"AttributeName": "username", "KeyType": "HASH"},
    {"AttributeName": "createdAt", "KeyType": "RANGE"},
]
ATTRIBUTE_DEFINITIONS = [
    {"AttributeName": "username", "AttributeType": "S"},
    {"AttributeName": "createdAt", "AttributeType": "N"},
]

# Attribute name aliases used by the per-user query.
_EXPRESSION_NAMES = {
    "#un": "username",
    "#th": "thought",
    "#ca": "createdAt",
    "#img": "image",
}
_KEY_CONDITION = "#un = :user"
_PROJECTION_EXPRESSION = "#un, #th, #ca, #img"


class ThoughtsTableClient:
    """Scan, query and put operations against the Thoughts table.

    Uses the low-level DynamoDB client, which may be shared between worker
    threads; items are converted to and from the wire format here.
    """

    def __init__(self, settings: AWSSettings) -> None:
        self._settings = settings
        self._client = boto3.client(
            "dynamodb",
            region_name=settings.region_name,
            endpoint_url=settings.endpoint_url,
        )
        self._serializer = TypeSerializer()
        self._deserializer = TypeDeserializer()

    @property
    def table_name(self) -> str:
        return self._settings.thoughts_table_name

    def scan_thoughts(self) -> list[Dict[str, Any]]:
        """Return every item in the table, in store-defined order."""
        params: Dict[str, Any] = {
            "TableName": self.table_name,
            "ConsistentRead": self._settings.consistent_read,
        }
        return self._collect(self._client.scan, params)

    def query_thoughts(self, username: str) -> list[Dict[str, Any]]:
        """Return one user's items, most recent ``createdAt`` first."""
        params: Dict[str, Any] = {
            "TableName": self.table_name,
            "KeyConditionExpression": _KEY_CONDITION,
            "ProjectionExpression": _PROJECTION_EXPRESSION,
            "ExpressionAttributeNames": dict(_EXPRESSION_NAMES),
            "ExpressionAttributeValues": {":user": self._serializer.serialize(username)},
            "ScanIndexForward": False,
            "ConsistentRead": self._settings.consistent_read,
        }
        return self._collect(self._client.query, params)

    def put_thought(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """Write an item unconditionally and return the raw acknowledgment.

        An existing item with the same (username, createdAt) is overwritten.
        """
        try:
            return self._client.put_item(
                TableName=self.table_name, Item=self._serialize(item)
            )
        except (ClientError, BotoCoreError) as exc:
            raise StoreError.from_boto(exc) from exc

    def create_table(self, *, wait: bool = False) -> Dict[str, Any]:
        """Provision the table and return its description."""
        try:
            description = self._client.create_table(
                TableName=self.table_name,
                KeySchema=KEY_SCHEMA,
                AttributeDefinitions=ATTRIBUTE_DEFINITIONS,
                ProvisionedThroughput={
                    "ReadCapacityUnits": self._settings.read_capacity_units,
                    "WriteCapacityUnits": self._settings.write_capacity_units,
                },
            )["TableDescription"]
            if wait:
                self._client.get_waiter("table_exists").wait(TableName=self.table_name)
                description = self._client.describe_table(TableName=self.table_name)[
                    "Table"
                ]
        except (ClientError, BotoCoreError) as exc:
            raise StoreError.from_boto(exc) from exc
        return {
            "TableName": description.get("TableName"),
            "TableStatus": description.get("TableStatus"),
            "KeySchema": description.get("KeySchema"),
            "TableArn": description.get("TableArn"),
        }

    def _serialize(self, item: Dict[str, Any]) -> Dict[str, Any]:
        return {name: self._serializer.serialize(value) for name, value in item.items()}

    def _deserialize(self, item: Dict[str, Any]) -> Dict[str, Any]:
        return {
            name: self._deserializer.deserialize(value) for name, value in item.items()
        }

    def _collect(
        self, operation: Callable[..., Dict[str, Any]], params: Dict[str, Any]
    ) -> list[Dict[str, Any]]:
        """Run a scan or query and follow LastEvaluatedKey to the end."""
        items: list[Dict[str, Any]] = []
        start_key: Optional[Dict[str, Any]] = None
        while True:
            call_params = dict(params)
            if start_key is not None:
                call_params["ExclusiveStartKey"] = start_key
            try:
                response = operation(**call_params)
            except (ClientError, BotoCoreError) as exc:
                raise StoreError.from_boto(exc) from exc
            page = response.get("Items", [])
            logger.debug("Fetched page of %d item(s)", len(page))
            items.extend(self._deserialize(item) for item in page)
            start_key = response.get("LastEvaluatedKey")
            if not start_key:
                return items


__all__ = ["ATTRIBUTE_DEFINITIONS", "KEY_SCHEMA", "ThoughtsTableClient"]
