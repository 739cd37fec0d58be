"""API request and response schemas using Pydantic.

Key distinction from models.py:
  - schemas.py: API contracts with Pydantic validation
  - models.py: Internal structures (dataclasses, no validation)
"""

from datetime import datetime
from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, Field

from modules.localization.models import (
    LanguageInfo,
    LanguageStatusSummary,
    MigrationProgress,
    MigrationResult,
)
from modules.localization.overrides import OverrideRecord


class ResolveResponse(BaseModel):
    """Schema for a resolved translation key."""

    key: str
    culture: str
    value: Optional[str] = None


class LanguageResponse(BaseModel):
    id: str
    name: str
    is_default: bool

    @classmethod
    def from_info(cls, info: LanguageInfo) -> "LanguageResponse":
        return cls(id=info.id, name=info.name, is_default=info.is_default)


class OverrideRequest(BaseModel):
    """Schema for creating or replacing an override."""

    key: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="Translation key",
            json_schema_extra={
                "example": "/contenttypes/icontentdata/properties/mainbody/caption"
            },
        ),
    ]
    language: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="Language or culture code",
            json_schema_extra={"example": "en"},
        ),
    ]
    value: Annotated[str, Field(..., description="Override text")]
    content_type_name: Annotated[
        Optional[str],
        Field(default=None, description="Content type the override belongs to"),
    ] = None


class OverrideResponse(BaseModel):
    id: str
    key: str
    language: str
    value: str
    content_type_name: Optional[str] = None
    modified_by: str
    modified_at: datetime

    @classmethod
    def from_record(cls, record: OverrideRecord) -> "OverrideResponse":
        return cls(
            id=record.id,
            key=record.key,
            language=record.language,
            value=record.value,
            content_type_name=record.content_type_name,
            modified_by=record.modified_by,
            modified_at=record.modified_at,
        )


class DeleteResponse(BaseModel):
    deleted: int


class ImportResponse(BaseModel):
    imported: int


class PromoteRequest(BaseModel):
    """Schema for moving a shared property's overrides into the translation files."""

    property_name: Annotated[
        str,
        Field(..., min_length=1, json_schema_extra={"example": "MainBody"}),
    ]
    language: Annotated[str, Field(..., min_length=1, json_schema_extra={"example": "sv"})]


class PromoteResponse(BaseModel):
    moved: int


class MigrationStatusResponse(BaseModel):
    needs_migration: bool


class MigrationProgressResponse(BaseModel):
    current_step: str
    completed: int
    total: int


class MigrationResultResponse(BaseModel):
    success: bool
    files_created: int
    errors: List[str] = Field(default_factory=list)
    progress: List[MigrationProgressResponse] = Field(default_factory=list)

    @classmethod
    def from_result(
        cls, result: MigrationResult, progress: List[MigrationProgress]
    ) -> "MigrationResultResponse":
        return cls(
            success=result.success,
            files_created=result.files_created,
            errors=list(result.errors),
            progress=[
                MigrationProgressResponse(
                    current_step=p.current_step, completed=p.completed, total=p.total
                )
                for p in progress
            ],
        )


class LanguageStatusResponse(BaseModel):
    language_id: str
    language_name: str
    is_default: bool
    content_types_total: int
    content_types_complete: int
    properties_total: int
    properties_complete: int
    tabs_total: int
    tabs_complete: int

    @classmethod
    def from_summary(cls, summary: LanguageStatusSummary) -> "LanguageStatusResponse":
        return cls(
            language_id=summary.language_id,
            language_name=summary.language_name,
            is_default=summary.is_default,
            content_types_total=summary.content_types_total,
            content_types_complete=summary.content_types_complete,
            properties_total=summary.properties_total,
            properties_complete=summary.properties_complete,
            tabs_total=summary.tabs_total,
            tabs_complete=summary.tabs_complete,
        )


class SharedPropertiesResponse(BaseModel):
    properties: Dict[str, List[str]]
