"""Tests for kit resolution across cache and sources."""

import asyncio

import pytest

from sidekit.exceptions import FetchError, InvalidSchemaError, KitNotFoundError
from sidekit.kits import KitCache, KitResolver, KitSource
from sidekit.kits.sources import RemoteKitSource
from sidekit.models import Kit
from sidekit.registry import FakeKitRegistry
from tests.test_utils.builders import adonisjs_kit_document


class StaticKitSource(KitSource):
    """Source serving fixed kits, counting lookups."""

    def __init__(self, name: str, kits: dict[str, Kit], *, delay: float = 0.0) -> None:
        self.name = name
        self._kits = kits
        self._delay = delay
        self.lookups: list[str] = []

    async def resolve(self, kit_id: str) -> Kit | None:
        self.lookups.append(kit_id)
        if self._delay:
            await asyncio.sleep(self._delay)
        return self._kits.get(kit_id)


async def test_resolve_caches_kit(adonisjs_registry: FakeKitRegistry) -> None:
    """Test that a second resolve returns the identical object without a lookup."""
    resolver = KitResolver(sources=[RemoteKitSource(adonisjs_registry)])

    first = await resolver.resolve("adonisjs")
    second = await resolver.resolve("adonisjs")

    assert first is second
    assert adonisjs_registry.fetched_kits == ["adonisjs"]
    assert "adonisjs" in resolver.cache


async def test_resolve_uses_provided_cache() -> None:
    kit = Kit(name="Cached")
    cache = KitCache()
    cache.set("cached", kit)
    source = StaticKitSource("remote", {})
    resolver = KitResolver(sources=[source], cache=cache)

    assert await resolver.resolve("cached") is kit
    assert source.lookups == []


async def test_resolve_first_source_wins() -> None:
    local_kit = Kit(name="Local")
    local = StaticKitSource("local", {"demo": local_kit})
    remote = StaticKitSource("remote", {"demo": Kit(name="Remote")})
    resolver = KitResolver(sources=[local, remote])

    assert await resolver.resolve("demo") is local_kit
    assert remote.lookups == []


async def test_resolve_falls_through_to_next_source() -> None:
    local = StaticKitSource("local", {})
    remote = StaticKitSource("remote", {"demo": Kit(name="Remote")})
    resolver = KitResolver(sources=[local, remote])

    kit = await resolver.resolve("demo")

    assert kit.name == "Remote"
    assert local.lookups == ["demo"]


async def test_resolve_not_found_carries_kit_id() -> None:
    resolver = KitResolver(
        sources=[StaticKitSource("local", {}), StaticKitSource("remote", {})]
    )

    with pytest.raises(KitNotFoundError) as exc_info:
        await resolver.resolve("ghost")

    assert exc_info.value.kit_id == "ghost"
    assert "searched: cache, local, remote" in str(exc_info.value)
    assert "ghost" not in resolver.cache


async def test_resolve_failures_are_not_cached() -> None:
    """Test that a kit missing on the first attempt is looked up again."""
    source = StaticKitSource("remote", {})
    resolver = KitResolver(sources=[source])

    for _ in range(2):
        with pytest.raises(KitNotFoundError):
            await resolver.resolve("ghost")

    assert source.lookups == ["ghost", "ghost"]


async def test_concurrent_resolves_share_one_lookup() -> None:
    source = StaticKitSource("remote", {"demo": Kit(name="Demo")}, delay=0.01)
    resolver = KitResolver(sources=[source])

    first, second = await asyncio.gather(resolver.resolve("demo"), resolver.resolve("demo"))

    assert first is second
    assert source.lookups == ["demo"]


async def test_resolve_propagates_fetch_error() -> None:
    resolver = KitResolver(sources=[RemoteKitSource(FakeKitRegistry(failing_status=500))])

    with pytest.raises(FetchError) as exc_info:
        await resolver.resolve("adonisjs")

    assert exc_info.value.status_code == 500


async def test_remote_source_not_found_returns_none() -> None:
    source = RemoteKitSource(FakeKitRegistry(kits={"adonisjs": adonisjs_kit_document()}))

    assert await source.resolve("missing") is None


async def test_remote_source_invalid_document() -> None:
    source = RemoteKitSource(FakeKitRegistry(kits={"broken": {"rules": []}}))

    with pytest.raises(InvalidSchemaError) as exc_info:
        await source.resolve("broken")

    assert exc_info.value.source == "https://registry.test/broken/sidekit.json"
    assert "name" in exc_info.value.details


async def test_remote_source_malformed_json() -> None:
    source = RemoteKitSource(FakeKitRegistry(kits={"broken": "<html>oops</html>"}))

    with pytest.raises(InvalidSchemaError, match="invalid JSON"):
        await source.resolve("broken")
