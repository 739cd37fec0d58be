"""Ordered localization provider chain.

The chain asks each registered provider in priority order for a string and
returns the first non-None answer. A provider returning None defers to the
next one; the chain itself never raises for a missing key.
"""

import threading
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence

from infrastructure.i18n.models import Culture
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LocalizationProvider(Protocol):
    """A source of localized strings.

    Methods:
        get_string: Resolve a key for a culture, or return None to defer
    """

    def get_string(
        self, original_key: str, normalized_key: Sequence[str], culture: Culture
    ) -> Optional[str]:
        """Resolve a localized string.

        Args:
            original_key: Key as requested by the caller.
            normalized_key: Lowercased key segments without empty parts.
            culture: Culture to resolve for.

        Returns:
            The localized string, or None to let the next provider answer.
        """
        ...


@dataclass
class _Registration:
    provider: LocalizationProvider
    priority: int
    order: int


class LocalizationChain:
    """Ordered list of localization providers.

    Lower priority values are consulted first; providers sharing a priority
    keep their registration order.
    """

    def __init__(self) -> None:
        self._registrations: List[_Registration] = []
        self._lock = threading.Lock()
        self._counter = 0

    def register(self, provider: LocalizationProvider, priority: int = 100) -> None:
        """Add a provider to the chain.

        Registering the same provider twice moves it to the new priority.

        Args:
            provider: Provider to add.
            priority: Position in the chain (lower runs earlier).
        """
        with self._lock:
            self._registrations = [
                r for r in self._registrations if r.provider is not provider
            ]
            self._counter += 1
            self._registrations.append(_Registration(provider, priority, self._counter))
            self._registrations.sort(key=lambda r: (r.priority, r.order))
        logger.info(
            "localization_provider_registered",
            provider=type(provider).__name__,
            priority=priority,
        )

    def unregister(self, provider: LocalizationProvider) -> bool:
        """Remove a provider. Returns True if it was registered."""
        with self._lock:
            before = len(self._registrations)
            self._registrations = [
                r for r in self._registrations if r.provider is not provider
            ]
            removed = len(self._registrations) != before
        if removed:
            logger.info(
                "localization_provider_unregistered", provider=type(provider).__name__
            )
        return removed

    @property
    def providers(self) -> List[LocalizationProvider]:
        """Registered providers in consultation order."""
        with self._lock:
            return [r.provider for r in self._registrations]

    def get_string(self, key: str, culture: Culture | str) -> Optional[str]:
        """Resolve ``key`` for ``culture`` through the chain.

        Args:
            key: Slash-delimited key, e.g. "/contenttypes/standardpage/name".
            culture: Culture or culture name.

        Returns:
            First non-None provider answer, or None when every provider defers.
        """
        if isinstance(culture, str):
            culture = Culture.from_string(culture)
        segments = [part for part in key.lower().split("/") if part]

        for provider in self.providers:
            value = provider.get_string(key, segments, culture)
            if value is not None:
                return value

        logger.debug("localization_key_unresolved", key=key, culture=culture.name)
        return None
