"""Store client adapters: capability interface, DynamoDB and in-memory clients."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dynagraph.infrastructure.store.base import (
    ScanPage,
    StoreClient,
    StoreError,
    TableExistsError,
    TableNotFoundError,
)
from dynagraph.infrastructure.store.memory import InMemoryStoreClient

if TYPE_CHECKING:
    from dynagraph.config.models import StoreConfig

__all__ = [
    "InMemoryStoreClient",
    "ScanPage",
    "StoreClient",
    "StoreError",
    "TableExistsError",
    "TableNotFoundError",
    "build_store_client",
]


def build_store_client(config: StoreConfig) -> StoreClient:
    """Create a DynamoDB store client from the ``[store]`` config section.

    An empty ``endpoint`` uses the AWS default endpoint for the region.
    Retries and timeouts are delegated to botocore.
    """
    import boto3
    from botocore.config import Config

    from dynagraph.infrastructure.store.dynamodb import DynamoDBStoreClient

    client = boto3.client(
        "dynamodb",
        region_name=config.region,
        endpoint_url=config.endpoint or None,
        config=Config(
            retries={"max_attempts": config.max_attempts, "mode": "standard"},
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
        ),
    )
    return DynamoDBStoreClient(client, wait_for_status=config.wait_for_status)
