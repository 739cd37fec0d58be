"""Host localization chain.

Resolves slash-delimited keys for a culture by asking registered providers
in priority order.

Main components:
- models: Culture
- chain: LocalizationProvider protocol and LocalizationChain
"""

from infrastructure.i18n.chain import LocalizationChain, LocalizationProvider
from infrastructure.i18n.models import Culture

__all__ = [
    "Culture",
    "LocalizationChain",
    "LocalizationProvider",
]
