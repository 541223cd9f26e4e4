"""Kit resolution and authoring."""

from sidekit.kits.cache import KitCache
from sidekit.kits.resolver import KitResolver, KitSource

__all__ = ["KitCache", "KitResolver", "KitSource"]
