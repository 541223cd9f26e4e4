"""Abstract interface for agent output formatters."""

from abc import ABC, abstractmethod
from pathlib import Path

from sidekit.models import MCPConfig, Rule


class Agent(ABC):
    """A downstream coding agent sidekit generates files for.

    Implementations only read the rules they are given and write their own
    files; they share no state with other agents.
    """

    name: str  # Identifier used in config.json "agents"
    label: str  # Human readable name

    @abstractmethod
    async def generate_rules(self, cwd: Path, rules: list[Rule]) -> list[Path]:
        """Write this agent's instruction files under cwd.

        Returns:
            Paths of the files written
        """
        ...

    @abstractmethod
    async def configure_mcps(self, cwd: Path, mcps: dict[str, MCPConfig]) -> Path | None:
        """Merge MCP server entries into this agent's server configuration file.

        Returns:
            Path of the file written, or None if nothing was written
        """
        ...
