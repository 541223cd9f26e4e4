"""Shared fixtures for sidekit tests."""

import pytest

from sidekit.kits import KitResolver
from sidekit.kits.sources import RemoteKitSource
from sidekit.registry import FakeKitRegistry
from tests.test_utils.builders import adonisjs_kit_document


@pytest.fixture
def adonisjs_registry() -> FakeKitRegistry:
    """Registry serving the adonisjs kit only."""
    return FakeKitRegistry(kits={"adonisjs": adonisjs_kit_document()})


@pytest.fixture
def adonisjs_resolver(adonisjs_registry: FakeKitRegistry) -> KitResolver:
    return KitResolver(sources=[RemoteKitSource(adonisjs_registry)])
