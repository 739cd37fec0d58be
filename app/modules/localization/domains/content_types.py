"""Content type and property translations.

Names and descriptions live in ``ReContentTypeNames_<lang>.xml``::

    <language name="English" id="en">
      <contenttypes>
        <standardpage>
          <name>Standard page</name>
          <description>...</description>
        </standardpage>
      </contenttypes>
    </language>

Property captions and help texts live in ``RePropertyNames_<lang>.xml``
under ``contenttypes/<type>/properties/<property>`` (type specific) or
``contenttypes/icontentdata/properties/<property>`` (shared). Saving always
writes the shared location.
"""

import xml.etree.ElementTree as ET
from typing import List, Optional

from infrastructure.logging import get_module_logger
from modules.localization.domains.base import LocalizationDomainService
from modules.localization.errors import InvalidArgumentError
from modules.localization.keys import CAPTION, HELP, SHARED_FALLBACK_OWNER
from modules.localization.languages import LanguageService
from modules.localization.models import (
    ContentTypeCategory,
    ContentTypeInfo,
    ContentTypeTranslation,
    PropertyTranslation,
)
from modules.localization.schema import ContentTypeRepository
from modules.localization.tree_store import (
    TranslationTreeStore,
    get_or_create,
    leaf_text,
    set_leaf,
)

logger = get_module_logger()

CONTENT_TYPE_NAMES_PREFIX = "ReContentTypeNames"
PROPERTY_NAMES_PREFIX = "RePropertyNames"


def _properties_section(root: Optional[ET.Element], owner: str) -> Optional[ET.Element]:
    if root is None:
        return None
    return root.find(f"contenttypes/{owner}/properties")


def shared_properties_element(root: ET.Element) -> ET.Element:
    """Get or create ``contenttypes/icontentdata/properties`` under ``root``."""
    content_types = get_or_create(root, "contenttypes")
    owner = get_or_create(content_types, SHARED_FALLBACK_OWNER)
    return get_or_create(owner, "properties")


class ContentTypeLocalizationService(LocalizationDomainService):
    """Reads and writes content type and property translations."""

    prefix = CONTENT_TYPE_NAMES_PREFIX

    def __init__(
        self,
        store: TranslationTreeStore,
        languages: LanguageService,
        content_types: ContentTypeRepository,
    ):
        super().__init__(store, languages)
        self.content_types = content_types

    def list_content_types(
        self, category: Optional[ContentTypeCategory] = None
    ) -> List[ContentTypeInfo]:
        """List content types, optionally of one category, by display name."""
        infos = [
            ContentTypeInfo(
                id=ct.id,
                name=ct.name,
                display_name=ct.display_name or ct.name,
                category=ct.category,
                description=ct.description,
            )
            for ct in self.content_types.list_content_types()
            if category is None or ct.category == category
        ]
        return sorted(infos, key=lambda info: info.display_name)

    def get_page_types(self) -> List[ContentTypeInfo]:
        return self.list_content_types(ContentTypeCategory.PAGE)

    def get_block_types(self) -> List[ContentTypeInfo]:
        return self.list_content_types(ContentTypeCategory.BLOCK)

    def get_media_types(self) -> List[ContentTypeInfo]:
        return self.list_content_types(ContentTypeCategory.MEDIA)

    def get_translation(
        self,
        content_type_name: str,
        category: ContentTypeCategory = ContentTypeCategory.PAGE,
    ) -> ContentTypeTranslation:
        """Load the translations of one content type for every language.

        The property list comes from the schema, sorted by name. An unknown
        content type yields a translation without properties.
        """
        definition = self.content_types.get_content_type(content_type_name)
        if definition is not None:
            category = definition.category
        property_names = sorted(definition.properties) if definition else []
        type_key = content_type_name.lower()

        names = self._documents(CONTENT_TYPE_NAMES_PREFIX)
        props = self._documents(PROPERTY_NAMES_PREFIX)

        translation = ContentTypeTranslation(
            content_type_name=content_type_name,
            category=category,
            name=self._read_entry(
                "name",
                names,
                lambda root: leaf_text(root, f"contenttypes/{type_key}/name"),
                "Name",
            ),
            description=self._read_entry(
                "description",
                names,
                lambda root: leaf_text(root, f"contenttypes/{type_key}/description"),
                "Description",
            ),
        )

        for property_name in property_names:
            prop_key = property_name.lower()

            def property_element(root: Optional[ET.Element]) -> Optional[ET.Element]:
                for owner in (type_key, SHARED_FALLBACK_OWNER):
                    section = _properties_section(root, owner)
                    found = section.find(prop_key) if section is not None else None
                    if found is not None:
                        return found
                return None

            translation.properties.append(
                PropertyTranslation(
                    property_name=property_name,
                    label=self._read_entry(
                        CAPTION,
                        props,
                        lambda root: leaf_text(property_element(root), CAPTION),
                        "Caption",
                    ),
                    description=self._read_entry(
                        HELP,
                        props,
                        lambda root: leaf_text(property_element(root), HELP),
                        "Help text",
                    ),
                )
            )

        return translation

    def save(self, translation: ContentTypeTranslation) -> None:
        """Persist a content type translation for every language."""
        type_key = translation.content_type_name.lower()

        def apply_names(root: ET.Element, language_id: str) -> None:
            element = get_or_create(get_or_create(root, "contenttypes"), type_key)
            set_leaf(element, "name", translation.name.get(language_id))
            set_leaf(element, "description", translation.description.get(language_id))

        self._save_languages(
            apply_names,
            lambda language_id: translation.name.has_value(language_id)
            or translation.description.has_value(language_id),
            CONTENT_TYPE_NAMES_PREFIX,
        )

        if translation.properties:

            def apply_properties(root: ET.Element, language_id: str) -> None:
                section = shared_properties_element(root)
                for prop in translation.properties:
                    element = get_or_create(section, prop.property_name.lower())
                    set_leaf(element, CAPTION, prop.label.get(language_id))
                    set_leaf(element, HELP, prop.description.get(language_id))

            self._save_languages(
                apply_properties,
                translation.properties_have_content,
                PROPERTY_NAMES_PREFIX,
            )

        translation.mark_clean()
        logger.info(
            "content_type_translation_saved",
            content_type=translation.content_type_name,
            properties=len(translation.properties),
        )

    def save_property(
        self,
        property_name: str,
        language_id: str,
        caption: Optional[str] = None,
        help_text: Optional[str] = None,
    ) -> None:
        """Write one property's caption and/or help text to the shared section.

        Empty values are left untouched.

        Raises:
            InvalidArgumentError: If ``language_id`` is not an enabled language.
        """
        language = self.languages.find(language_id)
        if language is None:
            raise InvalidArgumentError(f"Language '{language_id}' not found")

        root = self.store.load_document(PROPERTY_NAMES_PREFIX, language.id)
        if root is None:
            root = self.store.create_skeleton(language)

        element = get_or_create(shared_properties_element(root), property_name.lower())
        if caption:
            set_leaf(element, CAPTION, caption)
        if help_text:
            set_leaf(element, HELP, help_text)

        self.store.save_document(root, PROPERTY_NAMES_PREFIX, language.id)

    def get_all_translations(self) -> List[ContentTypeTranslation]:
        """Load translations for every content type in the schema."""
        return [
            self.get_translation(ct.name, ct.category)
            for ct in self.content_types.list_content_types()
        ]
