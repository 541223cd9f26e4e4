"""Remote kit registry integration."""

from sidekit.registry.abc import KitRegistry
from sidekit.registry.fake import FakeKitRegistry
from sidekit.registry.real import RealKitRegistry

__all__ = ["FakeKitRegistry", "KitRegistry", "RealKitRegistry"]
