"""Index of properties defined on more than one content type.

A property with the same name on several content types shares its caption
and help text through the ``icontentdata`` owner, so the editor flags those
properties.
"""

import threading
from typing import Dict, List, Optional

from modules.localization.schema import ContentTypeRepository


class SharedPropertyService:
    """Maps shared property names to the content types that define them.

    Lookups ignore case. The index is built on first use and kept until
    `invalidate` is called.
    """

    def __init__(self, content_types: ContentTypeRepository):
        self.content_types = content_types
        self._lock = threading.Lock()
        self._index: Optional[Dict[str, List[str]]] = None
        self._names: Dict[str, str] = {}

    def _build(self) -> Dict[str, List[str]]:
        owners: Dict[str, List[str]] = {}
        names: Dict[str, str] = {}
        for content_type in self.content_types.list_content_types():
            for property_name in content_type.properties:
                lowered = property_name.lower()
                names.setdefault(lowered, property_name)
                owners.setdefault(lowered, []).append(content_type.name)

        self._names = names
        return {
            lowered: sorted(types) for lowered, types in owners.items() if len(types) > 1
        }

    def _lookup(self) -> Dict[str, List[str]]:
        with self._lock:
            if self._index is None:
                self._index = self._build()
            return self._index

    def get_shared_properties(self) -> Dict[str, List[str]]:
        """Shared property name (first-seen casing) to sorted content type names."""
        index = self._lookup()
        return {self._names[lowered]: list(types) for lowered, types in index.items()}

    def is_shared(self, property_name: str) -> bool:
        return property_name.lower() in self._lookup()

    def get_content_types_for_property(self, property_name: str) -> List[str]:
        """Content types sharing ``property_name``, or [] when it is not shared."""
        return list(self._lookup().get(property_name.lower(), []))

    def invalidate(self) -> None:
        with self._lock:
            self._index = None
