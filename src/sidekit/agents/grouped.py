"""Agents that write all rules into a single grouped markdown file."""

import logging
from pathlib import Path

from sidekit.agents.abc import Agent
from sidekit.agents.mcp import merge_mcp_servers
from sidekit.io import write_file
from sidekit.models import MCPConfig, Rule
from sidekit.rules import group_rules

logger = logging.getLogger(__name__)


def render_group_separator(group: str) -> str:
    return f"=== {group} guidelines ===\n"


def render_grouped_rules(rules: list[Rule]) -> str:
    """Render rules as one document.

    Parentless rules come first, without a header. Each group follows in the
    order its parent was first seen, introduced by a separator line.
    """
    grouped = group_rules(rules)
    output = [rule.content for rule in grouped.global_rules]

    for group, members in grouped.groups.items():
        output.append(render_group_separator(group))
        output.extend(rule.content for rule in members)

    return "\n".join(output)


class GroupedFileAgent(Agent):
    """Base for agents reading one instruction file.

    Subclasses set the output paths, relative to the project directory.
    """

    rules_path: Path
    mcp_config_path: Path
    mcp_servers_key: str

    async def generate_rules(self, cwd: Path, rules: list[Rule]) -> list[Path]:
        path = cwd / self.rules_path
        write_file(path, render_grouped_rules(rules))
        logger.debug("%s: wrote %d rules to %s", self.label, len(rules), path)
        return [path]

    async def configure_mcps(self, cwd: Path, mcps: dict[str, MCPConfig]) -> Path | None:
        if not mcps:
            return None
        path = cwd / self.mcp_config_path
        merge_mcp_servers(path, self.mcp_servers_key, mcps)
        return path
