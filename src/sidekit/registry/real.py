"""HTTP implementation of the kit registry."""

import logging

import httpx

from sidekit.exceptions import FetchError
from sidekit.registry.abc import KitRegistry
from sidekit.settings import KIT_FILENAME, REGISTRY_INDEX_FILENAME

logger = logging.getLogger(__name__)


class RealKitRegistry(KitRegistry):
    """Fetch registry documents over HTTP.

    No timeout and no retries are applied: a hanging registry blocks the
    caller until the connection resolves.
    """

    def __init__(self, base_url: str, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Create RealKitRegistry.

        Args:
            base_url: Registry root, e.g. https://host/org/repo/ref/registry
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    def kit_document_url(self, kit_id: str) -> str:
        return f"{self._base_url}/{kit_id}/{KIT_FILENAME}"

    def index_url(self) -> str:
        return f"{self._base_url}/{REGISTRY_INDEX_FILENAME}"

    async def fetch_kit_document(self, kit_id: str) -> str | None:
        url = self.kit_document_url(kit_id)
        response = await self._get(url)

        if response.status_code == 404:
            return None
        if response.status_code != 200:
            raise FetchError(url, response.status_code, response.reason_phrase)
        return response.text

    async def fetch_index(self) -> str:
        url = self.index_url()
        response = await self._get(url)

        if response.status_code != 200:
            raise FetchError(url, response.status_code, response.reason_phrase)
        return response.text

    async def _get(self, url: str) -> httpx.Response:
        logger.debug("GET %s", url)
        async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
            try:
                response = await client.get(url)
            except httpx.TransportError as e:
                raise FetchError(url, None, str(e) or type(e).__name__) from e
        logger.debug("GET %s -> %d", url, response.status_code)
        return response
