"""Kit sources."""

from sidekit.kits.sources.local import LocalKitSource, find_package_root
from sidekit.kits.sources.remote import RemoteKitSource

__all__ = ["LocalKitSource", "RemoteKitSource", "find_package_root"]
