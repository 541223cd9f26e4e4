"""In-memory fake implementation of KitRegistry for testing."""

import json
from typing import Any

from sidekit.exceptions import FetchError
from sidekit.registry.abc import KitRegistry


class FakeKitRegistry(KitRegistry):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    This class has NO public setup methods.
    """

    def __init__(
        self,
        *,
        kits: dict[str, dict[str, Any] | str] | None = None,
        index: dict[str, Any] | None = None,
        failing_status: int | None = None,
    ) -> None:
        """Create FakeKitRegistry with pre-configured documents.

        Args:
            kits: Mapping of kit_id -> sidekit.json content (dict, or raw text
                to simulate malformed documents)
            index: registry.json content; fetch_index fails with 404 when None
            failing_status: If set, every fetch raises FetchError with this status
        """
        self._kits = kits or {}
        self._index = index
        self._failing_status = failing_status
        self._fetched_kits: list[str] = []

    @property
    def fetched_kits(self) -> list[str]:
        """Read-only access to the kit ids fetched so far, in order."""
        return self._fetched_kits.copy()

    def kit_document_url(self, kit_id: str) -> str:
        return f"https://registry.test/{kit_id}/sidekit.json"

    async def fetch_kit_document(self, kit_id: str) -> str | None:
        self._fetched_kits.append(kit_id)
        url = self.kit_document_url(kit_id)

        if self._failing_status is not None:
            raise FetchError(url, self._failing_status, "Simulated registry failure")

        document = self._kits.get(kit_id)
        if document is None:
            return None
        if isinstance(document, str):
            return document
        return json.dumps(document)

    async def fetch_index(self) -> str:
        url = "https://registry.test/registry.json"
        if self._failing_status is not None:
            raise FetchError(url, self._failing_status, "Simulated registry failure")
        if self._index is None:
            raise FetchError(url, 404, "Not Found")
        return json.dumps(self._index)
