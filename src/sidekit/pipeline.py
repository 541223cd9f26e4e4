"""End-to-end pipeline: project config to generated agent files."""

from pathlib import Path

from sidekit.context import SidekitContext
from sidekit.generation import generate
from sidekit.project import load_config
from sidekit.rules import load_rules


async def run_generation(ctx: SidekitContext) -> list[Path]:
    """Load the project config and rules, then generate every agent's files.

    Returns:
        Paths of all files written
    """
    config = load_config(ctx.cwd)
    rules = await load_rules(
        ctx.cwd,
        rules=config.rules,
        presets=config.presets,
        docs=config.docs,
        resolver=ctx.resolver,
    )
    return await generate(ctx.cwd, config.agents, rules, config.mcps, registry=ctx.agents)
