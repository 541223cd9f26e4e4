"""Resolve kits from the remote registry."""

from sidekit.io import parse_json_document
from sidekit.kits.resolver import KitSource
from sidekit.models import Kit
from sidekit.registry.abc import KitRegistry


class RemoteKitSource(KitSource):
    """Resolve kits through a KitRegistry.

    A kit the registry doesn't know is "not found"; fetch and validation
    errors propagate.
    """

    name = "remote"

    def __init__(self, registry: KitRegistry) -> None:
        self._registry = registry

    async def resolve(self, kit_id: str) -> Kit | None:
        document = await self._registry.fetch_kit_document(kit_id)
        if document is None:
            return None
        return parse_json_document(document, Kit, self._registry.kit_document_url(kit_id))
