"""Translation key helpers.

Keys are slash-delimited paths such as
``/contenttypes/standardpage/properties/mainbody/caption``. The canonical
form is lowercase, has exactly one leading slash and no trailing slash.
"""

from typing import List, Sequence

SHARED_FALLBACK_OWNER = "icontentdata"
PROPERTY_SECTION = "properties"
CAPTION = "caption"
HELP = "help"


def normalize_key(key: str) -> str:
    """Return the canonical form of ``key``.

    Idempotent: ``normalize_key(normalize_key(k)) == normalize_key(k)``.

    Args:
        key: Raw key, any case, with or without slashes.

    Returns:
        Lowercased key with a single leading slash and no trailing slash.
    """
    key = (key or "").strip().lower()
    return "/" + key.strip("/")


def split_key(key: str) -> List[str]:
    """Split a key into its non-empty lowercase segments."""
    return [segment for segment in key.lower().split("/") if segment]


def join_key(segments: Sequence[str]) -> str:
    """Join segments into a key with a single leading slash."""
    return "/" + "/".join(segments)


def is_property_key(segments: Sequence[str]) -> bool:
    """True when the segments address a content-type property.

    ``contenttypes/<type>/properties/<property>/<field>`` has at least five
    segments with ``properties`` in third position.
    """
    return len(segments) >= 5 and segments[2] == PROPERTY_SECTION


def derive_shared_fallback_key(segments: Sequence[str]) -> List[str]:
    """Return the shared-fallback form of a property key.

    The owning content type (second segment) is replaced with the shared
    owner so a property translated once applies to every type.

    Raises:
        ValueError: If ``segments`` is not a property key.
    """
    if not is_property_key(segments):
        raise ValueError(f"Not a property key: {join_key(segments)}")
    fallback = list(segments)
    fallback[1] = SHARED_FALLBACK_OWNER
    return fallback


def property_key(property_name: str, field: str, owner: str = SHARED_FALLBACK_OWNER) -> str:
    """Build the key of a property caption or help text."""
    return join_key(
        ["contenttypes", owner.lower(), PROPERTY_SECTION, property_name.lower(), field]
    )
