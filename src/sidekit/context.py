"""Application context with dependency injection.

The SidekitContext dataclass holds all dependencies (kit resolver, registry
client, agents) and is created once at CLI entry point, then threaded through
the application.
"""

from dataclasses import dataclass
from pathlib import Path

from sidekit.agents import AgentRegistry, create_default_agent_registry
from sidekit.kits import KitResolver
from sidekit.kits.sources import LocalKitSource, RemoteKitSource
from sidekit.registry import KitRegistry, RealKitRegistry
from sidekit.settings import get_registry_url


@dataclass(frozen=True)
class SidekitContext:
    """Immutable context holding all dependencies for sidekit operations.

    Attributes:
        cwd: Project directory commands operate on
        registry: Remote kit registry client
        resolver: Kit resolver (owns the kit cache for this run)
        agents: Agents available for generation
        debug: Debug flag for error handling (full stack traces)
    """

    cwd: Path
    registry: KitRegistry
    resolver: KitResolver
    agents: AgentRegistry
    debug: bool

    @staticmethod
    def for_test(
        cwd: Path,
        registry: KitRegistry | None = None,
        agents: AgentRegistry | None = None,
        debug: bool = False,
    ) -> "SidekitContext":
        """Create test context over a fake registry.

        Installed-package lookup is left out of the resolver so tests only see
        the kits they configure.

        Example:
            >>> from sidekit.registry import FakeKitRegistry
            >>> ctx = SidekitContext.for_test(tmp_path, registry=FakeKitRegistry(kits={...}))
        """
        from sidekit.registry import FakeKitRegistry

        resolved_registry: KitRegistry = registry if registry is not None else FakeKitRegistry()
        resolved_agents = agents if agents is not None else create_default_agent_registry()

        return SidekitContext(
            cwd=cwd,
            registry=resolved_registry,
            resolver=KitResolver(sources=[RemoteKitSource(resolved_registry)]),
            agents=resolved_agents,
            debug=debug,
        )


def create_context(*, cwd: Path, debug: bool) -> SidekitContext:
    """Create production context with real implementations.

    Kits are resolved from installed packages first, then from the remote
    registry.
    """
    registry = RealKitRegistry(get_registry_url())
    resolver = KitResolver(sources=[LocalKitSource(), RemoteKitSource(registry)])

    return SidekitContext(
        cwd=cwd,
        registry=registry,
        resolver=resolver,
        agents=create_default_agent_registry(),
        debug=debug,
    )
