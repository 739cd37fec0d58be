from typing import List, Optional

from fastapi import APIRouter, File, HTTPException, Query, UploadFile
from fastapi.responses import Response

from infrastructure.logging import get_module_logger
from infrastructure.services import LocalizationServicesDep
from modules.localization.api.schemas import (
    DeleteResponse,
    ImportResponse,
    LanguageResponse,
    LanguageStatusResponse,
    MigrationResultResponse,
    MigrationStatusResponse,
    OverrideRequest,
    OverrideResponse,
    PromoteRequest,
    PromoteResponse,
    ResolveResponse,
    SharedPropertiesResponse,
)
from modules.localization.models import MigrationProgress
from modules.localization.overrides import read_csv, write_csv

logger = get_module_logger()

router = APIRouter(prefix="/localization", tags=["Localization"])


@router.get("/resolve", response_model=ResolveResponse)
def resolve(
    services: LocalizationServicesDep,
    key: str = Query(..., min_length=1),
    culture: str = Query(..., min_length=1),
):
    """Resolve a key for a culture through the provider chain."""
    return ResolveResponse(
        key=key, culture=culture, value=services.chain.get_string(key, culture)
    )


@router.get("/languages", response_model=List[LanguageResponse])
def list_languages(services: LocalizationServicesDep):
    return [LanguageResponse.from_info(info) for info in services.languages.get_languages()]


@router.get("/overrides", response_model=List[OverrideResponse])
def list_overrides(
    services: LocalizationServicesDep, language: Optional[str] = None
):
    """List overrides, optionally for one language."""
    records = (
        services.overrides.get_by_language(language)
        if language
        else services.overrides.get_all()
    )
    return [OverrideResponse.from_record(record) for record in records]


@router.put("/overrides", response_model=OverrideResponse)
def save_override(services: LocalizationServicesDep, override: OverrideRequest):
    record = services.overrides.save(
        override.key, override.language, override.value, override.content_type_name
    )
    return OverrideResponse.from_record(record)


@router.delete("/overrides", response_model=DeleteResponse)
def delete_override(
    services: LocalizationServicesDep,
    key: str = Query(..., min_length=1),
    language: str = Query(..., min_length=1),
):
    if not services.overrides.delete(key, language):
        raise HTTPException(status_code=404, detail="Override not found")
    return DeleteResponse(deleted=1)


@router.delete("/overrides/all", response_model=DeleteResponse)
def delete_all_overrides(services: LocalizationServicesDep):
    return DeleteResponse(deleted=services.overrides.delete_all())


@router.delete("/overrides/{override_id}", response_model=DeleteResponse)
def delete_override_by_id(services: LocalizationServicesDep, override_id: str):
    if not services.overrides.delete_by_id(override_id):
        raise HTTPException(status_code=404, detail="Override not found")
    return DeleteResponse(deleted=1)


@router.get("/overrides/export")
def export_overrides(services: LocalizationServicesDep):
    """Download every override as CSV."""
    return Response(
        content=write_csv(services.overrides.export()),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="overrides.csv"'},
    )


@router.post("/overrides/import", response_model=ImportResponse)
async def import_overrides(
    services: LocalizationServicesDep, file: UploadFile = File(...)
):
    """Upload a CSV file of shared property overrides."""
    content = await file.read()
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise HTTPException(status_code=400, detail="CSV file must be UTF-8") from e

    imported = services.overrides.import_rows(read_csv(text))
    logger.info("override_csv_imported", file_name=file.filename, count=imported)
    return ImportResponse(imported=imported)


@router.post("/overrides/promote", response_model=PromoteResponse)
def promote_overrides(services: LocalizationServicesDep, request: PromoteRequest):
    moved = services.overrides.promote_to_file(request.property_name, request.language)
    if moved:
        services.status.invalidate()
    return PromoteResponse(moved=moved)


@router.get("/migration", response_model=MigrationStatusResponse)
def migration_status(services: LocalizationServicesDep):
    return MigrationStatusResponse(needs_migration=services.migration.needs_migration())


@router.post("/migration", response_model=MigrationResultResponse)
async def run_migration(services: LocalizationServicesDep):
    """Migrate legacy translation files when the folder still needs it."""
    if not services.migration.needs_migration():
        raise HTTPException(status_code=409, detail="Migration is not needed")

    progress: List[MigrationProgress] = []
    result = await services.migration.migrate(progress.append)
    services.status.invalidate()
    return MigrationResultResponse.from_result(result, progress)


@router.get("/status", response_model=List[LanguageStatusResponse])
def language_status(services: LocalizationServicesDep, refresh: bool = False):
    """Translation completeness per language."""
    if refresh:
        services.status.invalidate()
    return [
        LanguageStatusResponse.from_summary(summary)
        for summary in services.status.get_language_summaries()
    ]


@router.get("/shared-properties", response_model=SharedPropertiesResponse)
def shared_properties(services: LocalizationServicesDep):
    return SharedPropertiesResponse(
        properties=services.shared_properties.get_shared_properties()
    )
