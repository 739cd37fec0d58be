"""DynamoDB client for AWS operations.

Thin wrapper exposing the item operations the override store needs, each
returning an `OperationResult`.
"""

from typing import Any, Dict, Optional

from infrastructure.clients.aws.executor import execute_aws_api_call
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult


class DynamoDBClient:
    """Client for DynamoDB item operations.

    Args:
        session_provider: SessionProvider for region/endpoint/role handling
        max_retries: Retry budget for throttled calls
    """

    def __init__(self, session_provider: SessionProvider, max_retries: int = 3) -> None:
        self._session_provider = session_provider
        self._max_retries = max_retries
        self._service_name = "dynamodb"

    def _call(self, method: str, **kwargs) -> OperationResult:
        client_kwargs = self._session_provider.build_client_kwargs(
            service_name=self._service_name
        )
        return execute_aws_api_call(
            self._service_name,
            method,
            max_retries=self._max_retries,
            **client_kwargs,
            **kwargs,
        )

    def get_item(self, table_name: str, Key: Dict[str, Any], **kwargs) -> OperationResult:
        """Get an item by primary key.

        Args:
            table_name: Name of the DynamoDB table
            Key: Primary key (e.g., {"override_id": {"S": "abc"}})

        Returns:
            OperationResult with the raw response (``data["Item"]`` when found)
        """
        return self._call("get_item", TableName=table_name, Key=Key, **kwargs)

    def put_item(
        self, table_name: str, Item: Dict[str, Any], **kwargs
    ) -> OperationResult:
        """Put (create or replace) an item.

        Args:
            table_name: Name of the DynamoDB table
            Item: Item in DynamoDB attribute-value format

        Returns:
            OperationResult with status
        """
        return self._call("put_item", TableName=table_name, Item=Item, **kwargs)

    def delete_item(
        self, table_name: str, Key: Dict[str, Any], **kwargs
    ) -> OperationResult:
        """Delete an item by primary key.

        Pass ``ReturnValues="ALL_OLD"`` to learn whether something was deleted.
        """
        return self._call("delete_item", TableName=table_name, Key=Key, **kwargs)

    def scan(
        self, table_name: str, paginate: bool = True, **kwargs: Any
    ) -> OperationResult:
        """Scan a table.

        Args:
            table_name: Name of the DynamoDB table
            paginate: Follow pagination and return a flat list of items

        Returns:
            OperationResult with a list of items (paginated) or the raw response
        """
        if paginate:
            return self._call(
                "scan",
                keys=["Items"],
                force_paginate=True,
                TableName=table_name,
                **kwargs,
            )
        return self._call("scan", TableName=table_name, **kwargs)


def build_dynamodb_client(
    region: Optional[str],
    endpoint_url: Optional[str] = None,
    service_role_map: Optional[dict[str, str]] = None,
) -> DynamoDBClient:
    """Build a DynamoDBClient from plain configuration values."""
    return DynamoDBClient(
        SessionProvider(
            region=region,
            service_role_map=service_role_map,
            endpoint_url=endpoint_url,
        )
    )
