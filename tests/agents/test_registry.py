"""Tests for the agent registry."""

from pathlib import Path

import pytest

from sidekit.agents import Agent, AgentRegistry, create_default_agent_registry
from sidekit.models import MCPConfig, Rule


class NullAgent(Agent):
    name = "null"
    label = "Null"

    async def generate_rules(self, cwd: Path, rules: list[Rule]) -> list[Path]:
        return []

    async def configure_mcps(self, cwd: Path, mcps: dict[str, MCPConfig]) -> Path | None:
        return None


def test_default_registry_names() -> None:
    assert create_default_agent_registry().names() == ["claude", "opencode", "copilot", "cursor"]


def test_register_custom_agent() -> None:
    registry = create_default_agent_registry()
    agent = NullAgent()

    registry.register(agent)

    assert registry.get("null") is agent
    assert registry.names()[-1] == "null"


def test_register_duplicate_name() -> None:
    registry = AgentRegistry([NullAgent()])

    with pytest.raises(ValueError, match="already registered"):
        registry.register(NullAgent())


def test_get_unknown_agent() -> None:
    assert AgentRegistry().get("windsurf") is None
