"""Generation dispatcher: fan rules out to every configured agent."""

import asyncio
import logging
from pathlib import Path

from sidekit.agents import Agent, AgentRegistry
from sidekit.exceptions import GenerationError
from sidekit.models import MCPConfig, Rule

logger = logging.getLogger(__name__)


async def generate(
    cwd: Path,
    agents: list[str],
    rules: list[Rule],
    mcps: dict[str, MCPConfig],
    *,
    registry: AgentRegistry,
) -> list[Path]:
    """Run every configured agent concurrently and wait for all of them.

    Unknown agent names are skipped with a warning. If any agent fails, the
    others still run to completion and a single GenerationError listing every
    failure is raised; files already written are left in place.

    Returns:
        Paths written by all agents, in agent order
    """
    selected: list[Agent] = []
    for name in dict.fromkeys(agents):
        agent = registry.get(name)
        if agent is None:
            logger.warning("Unknown agent '%s' in configuration, skipping", name)
            continue
        selected.append(agent)

    results = await asyncio.gather(
        *(_generate_for_agent(agent, cwd, rules, mcps) for agent in selected),
        return_exceptions=True,
    )

    written: list[Path] = []
    failures: dict[str, Exception] = {}
    for agent, result in zip(selected, results, strict=True):
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            logger.debug("Agent %s failed", agent.name, exc_info=result)
            failures[agent.name] = result
            continue
        written.extend(result)

    if failures:
        raise GenerationError(failures)
    return written


async def _generate_for_agent(
    agent: Agent, cwd: Path, rules: list[Rule], mcps: dict[str, MCPConfig]
) -> list[Path]:
    logger.debug("Generating files for %s", agent.label)
    written = await agent.generate_rules(cwd, rules)
    mcp_path = await agent.configure_mcps(cwd, mcps)
    if mcp_path is not None:
        written.append(mcp_path)
    return written
