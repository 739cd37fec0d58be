"""Infrastructure AWS clients public API.

DI-friendly AWS clients returning `OperationResult`:

    from infrastructure.clients.aws import DynamoDBClient, SessionProvider

    client = DynamoDBClient(SessionProvider(region="ca-central-1"))
    result = client.get_item("translation_overrides", {"override_id": {"S": "abc"}})
    if result.is_success:
        item = result.data.get("Item")
"""

from infrastructure.clients.aws.dynamodb import DynamoDBClient, build_dynamodb_client
from infrastructure.clients.aws.session_provider import SessionProvider

__all__ = [
    "DynamoDBClient",
    "SessionProvider",
    "build_dynamodb_client",
]
