"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from membermatch import MethodDescription, Modifier


class FixtureRecord:
    pass


class FixtureRepository:
    def save(self, record: FixtureRecord, flush: bool) -> bool:
        return flush


@pytest.fixture
def make_description():
    """Factory for hand-built descriptions; defaults describe FixtureRepository.save."""

    def make(**overrides):
        fields = {
            "name": "save",
            "declaring_type": FixtureRepository,
            "modifiers": Modifier.PUBLIC,
            "parameter_types": (FixtureRecord, bool),
            "return_type": bool,
        }
        fields.update(overrides)
        return MethodDescription(**fields)

    return make


@pytest.fixture
def description(make_description):
    """Public two-argument instance method."""
    return make_description()
