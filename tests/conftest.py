"""Shared fixtures for view option tests."""

from __future__ import annotations

import pytest

from couch_viewopts import OptionAssigner, OptionRecord, build_default_registry


@pytest.fixture
def registry():
    """Fresh registry holding the standard view options."""
    return build_default_registry()


@pytest.fixture
def assigner(registry) -> OptionAssigner:
    return OptionAssigner(registry=registry)


@pytest.fixture
def record():
    """An empty record, cleaned up after the test."""
    with OptionRecord() as rec:
        yield rec
