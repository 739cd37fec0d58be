"""Infrastructure modules for the translation service.

Centralized infrastructure components:
- configuration: Settings management (Settings, AwsSettings, LocalizationSettings)
- logging: Structured logging and request context (get_module_logger)
- clients: AWS clients (DynamoDBClient, SessionProvider)
- i18n: Culture model and the ordered localization provider chain
- operations: Operation results and status classification
- services: Dependency injection services (SettingsDep, LocalizationServicesDep)
"""

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
