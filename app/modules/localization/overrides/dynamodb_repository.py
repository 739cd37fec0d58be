"""DynamoDB-backed override repository for multi-instance deployments.

Table Schema:
    PK: override_id (String), derived from key and language
    Attributes: key, language, value, content_type_name, modified_by,
               modified_at (ISO 8601)
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from infrastructure.clients.aws import DynamoDBClient
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from modules.localization.errors import OverrideStoreError
from modules.localization.overrides.models import OverrideRecord, override_id_for

logger = get_module_logger()


def record_to_item(record: OverrideRecord) -> Dict[str, Dict[str, str]]:
    """Convert a record to DynamoDB attribute-value format."""
    item = {
        "override_id": {"S": record.id},
        "key": {"S": record.key},
        "language": {"S": record.language},
        "value": {"S": record.value},
        "modified_by": {"S": record.modified_by},
        "modified_at": {"S": record.modified_at.isoformat()},
    }
    if record.content_type_name:
        item["content_type_name"] = {"S": record.content_type_name}
    return item


def item_to_record(item: Dict[str, Any]) -> OverrideRecord:
    """Convert a DynamoDB item back to a record."""

    def text(name: str) -> Optional[str]:
        attr = item.get(name)
        return attr.get("S") if isinstance(attr, dict) else None

    modified_at = text("modified_at")
    return OverrideRecord(
        id=text("override_id") or "",
        key=text("key") or "",
        language=text("language") or "",
        value=text("value") or "",
        content_type_name=text("content_type_name"),
        modified_by=text("modified_by") or "",
        modified_at=datetime.fromisoformat(modified_at) if modified_at else None,
    )


class DynamoDBOverrideRepository:
    """Override repository stored in a DynamoDB table.

    Failed calls raise OverrideStoreError after the client's own throttling
    retries are exhausted.

    Args:
        client: DynamoDBClient used for every call
        table_name: DynamoDB table name
    """

    def __init__(self, client: DynamoDBClient, table_name: str):
        self.client = client
        self.table_name = table_name
        logger.info("dynamodb_override_repository_initialized", table_name=table_name)

    def _check(self, result: OperationResult, operation: str) -> OperationResult:
        if not result.is_success:
            logger.error(
                "dynamodb_override_operation_failed",
                operation=operation,
                table_name=self.table_name,
                error=result.message,
                error_code=result.error_code,
            )
            raise OverrideStoreError(
                f"Override {operation} failed: {result.message}", result.error_code
            )
        return result

    def list_all(self) -> List[OverrideRecord]:
        result = self._check(self.client.scan(self.table_name), "scan")
        return [item_to_record(item) for item in result.data or []]

    def get(self, key: str, language: str) -> Optional[OverrideRecord]:
        result = self._check(
            self.client.get_item(
                self.table_name,
                Key={"override_id": {"S": override_id_for(key, language)}},
            ),
            "get",
        )
        item = (result.data or {}).get("Item")
        return item_to_record(item) if item else None

    def upsert(self, record: OverrideRecord) -> OverrideRecord:
        self._check(
            self.client.put_item(self.table_name, Item=record_to_item(record)), "put"
        )
        logger.debug("override_upserted", key=record.key, language=record.language)
        return record

    def delete(self, key: str, language: str) -> bool:
        return self.delete_by_id(override_id_for(key, language))

    def delete_by_id(self, override_id: str) -> bool:
        result = self._check(
            self.client.delete_item(
                self.table_name,
                Key={"override_id": {"S": override_id}},
                ReturnValues="ALL_OLD",
            ),
            "delete",
        )
        return bool((result.data or {}).get("Attributes"))

    def delete_all(self) -> int:
        count = 0
        for record in self.list_all():
            if self.delete_by_id(record.id):
                count += 1
        return count
