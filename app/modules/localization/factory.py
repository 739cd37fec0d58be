"""Composition root for the localization services."""

from dataclasses import dataclass
from typing import Optional

from infrastructure.clients.aws import build_dynamodb_client
from infrastructure.configuration import Settings
from infrastructure.i18n import LocalizationChain
from infrastructure.logging import get_module_logger
from modules.localization.domains import (
    ContentTypeLocalizationService,
    DisplayLocalizationService,
    EditorHintLocalizationService,
    TabLocalizationService,
    ViewLocalizationService,
)
from modules.localization.languages import LanguageService
from modules.localization.migration import MigrationService
from modules.localization.overrides import (
    DynamoDBOverrideRepository,
    InMemoryOverrideRepository,
    OverrideCache,
    OverrideRepository,
    OverrideService,
)
from modules.localization.providers import (
    OverrideLocalizationProvider,
    TreeFileLocalizationProvider,
    register_providers,
)
from modules.localization.schema import InMemorySchemaRepository, load_schema_snapshot
from modules.localization.shared_properties import SharedPropertyService
from modules.localization.status import TranslationStatusEvaluator, TranslationStatusService
from modules.localization.tree_store import TranslationTreeStore

logger = get_module_logger()


@dataclass
class LocalizationServices:
    """Every localization service, wired together."""

    schema: InMemorySchemaRepository
    languages: LanguageService
    store: TranslationTreeStore
    content_types: ContentTypeLocalizationService
    tabs: TabLocalizationService
    display: DisplayLocalizationService
    editor_hints: EditorHintLocalizationService
    views: ViewLocalizationService
    shared_properties: SharedPropertyService
    overrides: OverrideService
    status: TranslationStatusService
    migration: MigrationService
    chain: LocalizationChain
    overrides_enabled: bool = True


def build_override_repository(settings: Settings) -> OverrideRepository:
    """Select the override backend configured by OVERRIDE_BACKEND."""
    localization = settings.localization
    if localization.OVERRIDE_BACKEND == "dynamodb":
        client = build_dynamodb_client(
            region=settings.aws.AWS_REGION,
            endpoint_url=settings.aws.ENDPOINT_URL,
            service_role_map=settings.aws.SERVICE_ROLE_MAP,
        )
        return DynamoDBOverrideRepository(client, localization.OVERRIDE_TABLE_NAME)
    return InMemoryOverrideRepository()


def build_localization_services(
    settings: Settings,
    schema: Optional[InMemorySchemaRepository] = None,
    override_repository: Optional[OverrideRepository] = None,
) -> LocalizationServices:
    """Build the localization services from settings.

    Args:
        settings: Application settings.
        schema: Schema collaborators; loaded from SCHEMA_FILE when omitted.
        override_repository: Override storage; chosen from OVERRIDE_BACKEND
            when omitted.

    Returns:
        LocalizationServices with the provider chain already registered.
    """
    config = settings.localization
    if schema is None:
        schema = (
            load_schema_snapshot(config.SCHEMA_FILE)
            if config.SCHEMA_FILE
            else InMemorySchemaRepository()
        )

    languages = LanguageService(schema)
    store = TranslationTreeStore(config.translation_path, config.ENABLE_FILE_SAVING)
    content_types = ContentTypeLocalizationService(store, languages, schema)
    tabs = TabLocalizationService(store, languages, schema)
    overrides = OverrideService(
        override_repository or build_override_repository(settings),
        languages,
        cache=OverrideCache(ttl_seconds=config.OVERRIDE_CACHE_TTL_SECONDS),
        content_types=content_types,
    )

    chain = LocalizationChain()
    register_providers(
        chain,
        TreeFileLocalizationProvider(store),
        OverrideLocalizationProvider(overrides) if config.ENABLE_OVERRIDES else None,
    )

    logger.info(
        "localization_services_built",
        translation_folder=str(store.folder),
        override_backend=config.OVERRIDE_BACKEND,
        overrides_enabled=config.ENABLE_OVERRIDES,
    )
    return LocalizationServices(
        schema=schema,
        languages=languages,
        store=store,
        content_types=content_types,
        tabs=tabs,
        display=DisplayLocalizationService(store, languages),
        editor_hints=EditorHintLocalizationService(store, languages),
        views=ViewLocalizationService(store, languages, config.VIEW_FILE_PATTERN),
        shared_properties=SharedPropertyService(schema),
        overrides=overrides,
        status=TranslationStatusService(
            languages,
            content_types,
            tabs,
            TranslationStatusEvaluator(
                config.STATUS_GREEN_THRESHOLD, config.STATUS_YELLOW_THRESHOLD
            ),
        ),
        migration=MigrationService(store, languages),
        chain=chain,
        overrides_enabled=config.ENABLE_OVERRIDES,
    )
