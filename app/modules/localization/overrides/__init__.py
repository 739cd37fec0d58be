"""Override store: records, repositories, cache, service and CSV codec."""

from modules.localization.overrides.cache import OverrideCache
from modules.localization.overrides.csv_io import CSV_HEADER, read_csv, write_csv
from modules.localization.overrides.dynamodb_repository import (
    DynamoDBOverrideRepository,
)
from modules.localization.overrides.models import (
    SYSTEM_USER,
    OverrideExportRow,
    OverrideImportRow,
    OverrideRecord,
    OverrideRow,
    OverrideType,
)
from modules.localization.overrides.repository import (
    InMemoryOverrideRepository,
    OverrideRepository,
)
from modules.localization.overrides.service import OverrideService

__all__ = [
    "CSV_HEADER",
    "SYSTEM_USER",
    "DynamoDBOverrideRepository",
    "InMemoryOverrideRepository",
    "OverrideCache",
    "OverrideExportRow",
    "OverrideImportRow",
    "OverrideRecord",
    "OverrideRepository",
    "OverrideRow",
    "OverrideService",
    "OverrideType",
    "read_csv",
    "write_csv",
]
