"""DynamoDB implementation of ReelStore."""

from decimal import Decimal
from typing import Any

import boto3
from botocore.exceptions import ClientError
from finreels_shared import Reel

from .client_config import client_config


def _reel_to_item(reel: Reel) -> dict[str, Any]:
    """Convert Reel to DynamoDB item (native types for resource API)."""
    d = reel.model_dump(mode="json")
    return {k: v for k, v in d.items() if v is not None}


def _item_to_reel(item: dict[str, Any]) -> Reel:
    """Convert DynamoDB item to Reel."""
    return Reel.model_validate({k: _plain(v) for k, v in item.items()})


def _plain(value: Any) -> Any:
    """Turn resource-API Decimals back into ints (lists handled element-wise)."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


class DynamoDBReelStore:
    """ReelStore: DynamoDB reels table with reel_id as the only key attribute."""

    KEY_ATTRIBUTE = "reel_id"

    def __init__(
        self,
        table_name: str,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        self._table_name = table_name
        self._resource = boto3.resource(
            "dynamodb",
            region_name=region_name,
            endpoint_url=endpoint_url,
            config=client_config(timeout_seconds),
        )
        self._table = self._resource.Table(table_name)

    def put(self, reel: Reel) -> None:
        """Create or overwrite a reel record."""
        self._table.put_item(Item=_reel_to_item(reel))

    def get(self, reel_id: str) -> Reel | None:
        """Return the reel if it exists, otherwise None."""
        resp = self._table.get_item(Key={self.KEY_ATTRIBUTE: reel_id})
        item = resp.get("Item")
        if not item:
            return None
        return _item_to_reel(item)

    def scan_all(self) -> list[Reel]:
        """Scan the whole table, following LastEvaluatedKey across pages."""
        params: dict[str, Any] = {}
        reels: list[Reel] = []
        while True:
            resp = self._table.scan(**params)
            reels.extend(_item_to_reel(row) for row in resp.get("Items", []))
            last_key = resp.get("LastEvaluatedKey")
            if not last_key:
                return reels
            params["ExclusiveStartKey"] = last_key

    def atomic_update(
        self,
        reel_id: str,
        *,
        increments: dict[str, int] | None = None,
        appends: dict[str, list[str]] | None = None,
    ) -> dict[str, Any] | None:
        """
        Apply counter increments and list appends in one conditional UpdateItem.

        SET #a0 = if_not_exists(#a0, :zero) + :v0, #a1 = list_append(if_not_exists(#a1, :empty), :v1)
        only if the item exists. Concurrent callers never lose an increment or append.
        Returns the UPDATED_NEW attributes, or None when the reel does not exist.
        """
        updates: list[str] = []
        expr_names: dict[str, str] = {}
        expr_values: dict[str, Any] = {}

        for i, (name, delta) in enumerate((increments or {}).items()):
            expr_names[f"#i{i}"] = name
            expr_values[f":i{i}"] = delta
            expr_values[":zero"] = 0
            updates.append(f"#i{i} = if_not_exists(#i{i}, :zero) + :i{i}")
        for i, (name, values) in enumerate((appends or {}).items()):
            expr_names[f"#l{i}"] = name
            expr_values[f":l{i}"] = list(values)
            expr_values[":empty"] = []
            updates.append(f"#l{i} = list_append(if_not_exists(#l{i}, :empty), :l{i})")

        if not updates:
            reel = self.get(reel_id)
            return None if reel is None else {}

        expr_names["#key"] = self.KEY_ATTRIBUTE
        try:
            resp = self._table.update_item(
                Key={self.KEY_ATTRIBUTE: reel_id},
                UpdateExpression="SET " + ", ".join(updates),
                ConditionExpression="attribute_exists(#key)",
                ExpressionAttributeNames=expr_names,
                ExpressionAttributeValues=expr_values,
                ReturnValues="UPDATED_NEW",
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                return None
            raise
        return {k: _plain(v) for k, v in resp.get("Attributes", {}).items()}
