"""DynamoDB-backed store client (boto3 low-level client).

Items are string-typed on the way in. Existing tables may carry other
scalar types, which are read back as their string form.
"""

from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from dynagraph.infrastructure.store.base import (
    ScanPage,
    StoreClient,
    StoreError,
    TableExistsError,
    TableNotFoundError,
)

logger = logging.getLogger(__name__)


def _to_attribute_value(value: str) -> dict[str, str]:
    return {"S": value}


def _from_attribute_value(value: dict[str, Any]) -> str:
    if "S" in value:
        return str(value["S"])
    if "N" in value:
        return str(value["N"])
    if "BOOL" in value:
        return "true" if value["BOOL"] else "false"
    if "NULL" in value:
        return ""
    # Sets, lists and maps have no flat string form worth guessing at.
    return str(next(iter(value.values()), ""))


def _store_error(exc: Exception, *, table: str) -> StoreError:
    """Translate a botocore failure into the store error taxonomy."""
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        code = str(error.get("Code", ""))
        message = str(error.get("Message", "")) or str(exc)
        if code == "ResourceNotFoundException":
            return TableNotFoundError(f"Table '{table}' not found: {message}", code=code)
        return StoreError(f"{code}: {message}", code=code)
    return StoreError(str(exc), code=type(exc).__name__)


class DynamoDBStoreClient(StoreClient):
    """StoreClient over ``boto3.client("dynamodb")``.

    Args:
        client: A boto3 DynamoDB client (real or stubbed).
        wait_for_status: Block on the ``table_exists``/``table_not_exists``
            waiters after create/delete so the table is usable (or gone)
            when the call returns.
    """

    def __init__(self, client: Any, *, wait_for_status: bool = True) -> None:
        self._client = client
        self._wait_for_status = wait_for_status

    def describe_table(self, name: str) -> dict[str, Any]:
        try:
            response = self._client.describe_table(TableName=name)
        except (ClientError, BotoCoreError) as exc:
            raise _store_error(exc, table=name) from exc
        return dict(response.get("Table", {}))

    def create_table(self, definition: dict[str, Any]) -> None:
        name = definition["TableName"]
        try:
            self._client.create_table(**definition)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") == "ResourceInUseException":
                raise TableExistsError(
                    f"Table '{name}' already exists", code="ResourceInUseException"
                ) from exc
            raise _store_error(exc, table=name) from exc
        except BotoCoreError as exc:
            raise _store_error(exc, table=name) from exc
        logger.debug("create_table requested for %s", name)
        if self._wait_for_status:
            self._wait("table_exists", name)

    def delete_table(self, name: str) -> None:
        try:
            self._client.delete_table(TableName=name)
        except (ClientError, BotoCoreError) as exc:
            raise _store_error(exc, table=name) from exc
        logger.debug("delete_table requested for %s", name)
        if self._wait_for_status:
            self._wait("table_not_exists", name)

    def scan_page(
        self,
        table_name: str,
        limit: int,
        start_token: Any | None = None,
    ) -> ScanPage:
        kwargs: dict[str, Any] = {"TableName": table_name, "Limit": limit}
        if start_token:
            kwargs["ExclusiveStartKey"] = start_token
        try:
            response = self._client.scan(**kwargs)
        except (ClientError, BotoCoreError) as exc:
            raise _store_error(exc, table=table_name) from exc

        items = [
            {key: _from_attribute_value(value) for key, value in raw.items()}
            for raw in response.get("Items", [])
        ]
        return ScanPage(
            items=items,
            count=int(response.get("Count", len(items))),
            next_token=response.get("LastEvaluatedKey") or None,
        )

    def put_item(self, table_name: str, item: dict[str, str]) -> None:
        try:
            self._client.put_item(
                TableName=table_name,
                Item={key: _to_attribute_value(value) for key, value in item.items()},
            )
        except (ClientError, BotoCoreError) as exc:
            raise _store_error(exc, table=table_name) from exc

    def _wait(self, waiter_name: str, table: str) -> None:
        try:
            self._client.get_waiter(waiter_name).wait(TableName=table)
        except (ClientError, BotoCoreError) as exc:
            raise _store_error(exc, table=table) from exc
