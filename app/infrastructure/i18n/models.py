"""Culture model for the localization chain.

Defines the culture a lookup is made for, parsed from an IETF BCP 47 style
tag such as ``en``, ``en-GB`` or ``pt-BR``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Culture:
    """A requested culture.

    Frozen so it can be used in cache keys.

    Attributes:
        name: Full culture name as requested (e.g. "en-GB").
    """

    name: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Culture name must not be empty")

    @classmethod
    def from_string(cls, culture: str) -> "Culture":
        """Create a Culture, accepting ``_`` as the subtag separator."""
        return cls(name=culture.strip().replace("_", "-"))

    @property
    def language(self) -> str:
        """Two-letter (primary) language code, e.g. "en" for "en-GB"."""
        return self.name.split("-")[0]

    @property
    def region(self) -> str:
        """Region subtag, e.g. "GB" for "en-GB", or "" when absent."""
        parts = self.name.split("-", 1)
        return parts[1] if len(parts) > 1 else ""

    @property
    def has_region(self) -> bool:
        """True when the culture name carries a region subtag."""
        return bool(self.region)

    def __str__(self) -> str:
        return self.name
