"""Test data factories for deterministic test data generation."""

from tests.factories.localization import (
    make_content_types,
    make_language_branches,
    make_schema,
    make_tabs,
    write_language_file,
    write_legacy_file,
)

__all__ = [
    "make_content_types",
    "make_language_branches",
    "make_schema",
    "make_tabs",
    "write_language_file",
    "write_legacy_file",
]
