"""Kit resolution across an ordered chain of sources."""

import asyncio
import logging
from abc import ABC, abstractmethod

from sidekit.exceptions import KitNotFoundError
from sidekit.kits.cache import KitCache
from sidekit.models import Kit

logger = logging.getLogger(__name__)


class KitSource(ABC):
    """A place kits can be resolved from."""

    name: str

    @abstractmethod
    async def resolve(self, kit_id: str) -> Kit | None:
        """Resolve a kit by id.

        Returns None when this source does not provide the kit, so the
        resolver can try the next source. Errors that must stop resolution
        are raised.
        """
        ...


class KitResolver:
    """Resolve kits from a cache first, then from each source in order.

    The first source that returns a kit wins, and the kit is cached under the
    requested id. Concurrent requests for the same id while a lookup is in
    flight share that lookup.
    """

    def __init__(self, sources: list[KitSource], cache: KitCache | None = None) -> None:
        self._sources = sources
        self._cache = cache if cache is not None else KitCache()
        self._pending: dict[str, asyncio.Task[Kit]] = {}

    @property
    def cache(self) -> KitCache:
        return self._cache

    async def resolve(self, kit_id: str) -> Kit:
        """Resolve a kit by id.

        Raises:
            KitNotFoundError: If no source provides the kit
            FetchError: If the remote registry answers with an unexpected status
            InvalidSchemaError: If the remote registry returns an invalid kit
        """
        cached = self._cache.get(kit_id)
        if cached is not None:
            logger.debug("Kit cache hit: %s", kit_id)
            return cached

        pending = self._pending.get(kit_id)
        if pending is not None:
            logger.debug("Kit lookup already in flight: %s", kit_id)
            return await pending

        task = asyncio.ensure_future(self._resolve_from_sources(kit_id))
        self._pending[kit_id] = task
        try:
            return await task
        finally:
            self._pending.pop(kit_id, None)

    async def _resolve_from_sources(self, kit_id: str) -> Kit:
        for source in self._sources:
            kit = await source.resolve(kit_id)
            if kit is None:
                logger.debug("Kit %s not provided by %s source", kit_id, source.name)
                continue

            logger.debug("Resolved kit %s from %s source", kit_id, source.name)
            self._cache.set(kit_id, kit)
            return kit

        searched = ", ".join(["cache", *(source.name for source in self._sources)])
        raise KitNotFoundError(kit_id, f"not provided by any source (searched: {searched})")
