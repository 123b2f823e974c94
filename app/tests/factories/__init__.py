"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    FakeDocument,
    FakeElement,
    FakeSelect,
    make_document,
    make_environment,
    make_messages,
)

__all__ = [
    "FakeDocument",
    "FakeElement",
    "FakeSelect",
    "make_document",
    "make_environment",
    "make_messages",
]
