"""Tests for the generation dispatcher."""

import logging
from pathlib import Path

import pytest

from sidekit.agents import Agent, AgentRegistry
from sidekit.agents.claude import ClaudeAgent
from sidekit.agents.cursor import CursorAgent
from sidekit.exceptions import GenerationError
from sidekit.generation import generate
from sidekit.models import MCPConfig, Rule
from tests.test_utils.builders import make_rule


class FailingAgent(Agent):
    name = "failing"
    label = "Failing"

    async def generate_rules(self, cwd: Path, rules: list[Rule]) -> list[Path]:
        raise OSError("disk full")

    async def configure_mcps(self, cwd: Path, mcps: dict[str, MCPConfig]) -> Path | None:
        return None


RULES = [make_rule("intro", content="Hello"), make_rule("a", parent="x", content="Body A")]


async def test_generate_runs_every_configured_agent(tmp_path: Path) -> None:
    registry = AgentRegistry([ClaudeAgent(), CursorAgent()])

    written = await generate(tmp_path, ["claude", "cursor"], RULES, {}, registry=registry)

    assert written == [tmp_path / "CLAUDE.md", tmp_path / ".copilot" / "rules" / "x-a.mdc"]


async def test_generate_includes_mcp_files(tmp_path: Path) -> None:
    registry = AgentRegistry([ClaudeAgent()])
    mcps = {"fs": MCPConfig(type="stdio", command="npx")}

    written = await generate(tmp_path, ["claude"], RULES, mcps, registry=registry)

    assert written == [tmp_path / "CLAUDE.md", tmp_path / ".mcp.json"]


async def test_generate_skips_unknown_agents(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    registry = AgentRegistry([ClaudeAgent()])

    with caplog.at_level(logging.WARNING, logger="sidekit"):
        written = await generate(tmp_path, ["windsurf", "claude"], RULES, {}, registry=registry)

    assert written == [tmp_path / "CLAUDE.md"]
    assert "windsurf" in caplog.text


async def test_generate_runs_duplicate_agent_once(tmp_path: Path) -> None:
    registry = AgentRegistry([ClaudeAgent()])

    written = await generate(tmp_path, ["claude", "claude"], RULES, {}, registry=registry)

    assert written == [tmp_path / "CLAUDE.md"]


async def test_generate_no_agents(tmp_path: Path) -> None:
    assert await generate(tmp_path, [], RULES, {}, registry=AgentRegistry()) == []


async def test_generate_aggregates_failures(tmp_path: Path) -> None:
    """Test that one failing agent doesn't stop the others."""
    registry = AgentRegistry([FailingAgent(), ClaudeAgent()])

    with pytest.raises(GenerationError) as exc_info:
        await generate(tmp_path, ["failing", "claude"], RULES, {}, registry=registry)

    assert list(exc_info.value.failures) == ["failing"]
    assert isinstance(exc_info.value.failures["failing"], OSError)
    assert "failing: disk full" in str(exc_info.value)
    assert (tmp_path / "CLAUDE.md").read_text(encoding="utf-8") == (
        "Hello\n=== x guidelines ===\n\nBody A"
    )
