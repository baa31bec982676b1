"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_document,
    make_raw_translations,
    make_resolver,
    make_session,
    make_session_config,
    make_translation_trees,
)

__all__ = [
    "make_document",
    "make_raw_translations",
    "make_resolver",
    "make_session",
    "make_session_config",
    "make_translation_trees",
]
