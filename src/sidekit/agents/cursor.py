"""Cursor agent: one .mdc file per rule."""

import logging
from pathlib import Path

import yaml

from sidekit.agents.abc import Agent
from sidekit.agents.mcp import merge_mcp_servers
from sidekit.io import create_dir, write_file
from sidekit.models import MCPConfig, Rule

logger = logging.getLogger(__name__)


def render_cursor_rule(rule: Rule) -> str:
    """Render a rule as an always-applied .mdc document."""
    fields = {"description": rule.name, "alwaysApply": True}
    fm_yaml = yaml.dump(fields, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return f"---\n{fm_yaml}---\n{rule.content}"


class CursorAgent(Agent):
    """Writes `<parent>-<id>.mdc` files and .cursor/mcp.json.

    Rules without a parent are not written.
    """

    name = "cursor"
    label = "Cursor"
    rules_dir = Path(".copilot") / "rules"
    mcp_config_path = Path(".cursor") / "mcp.json"
    mcp_servers_key = "mcpServers"

    async def generate_rules(self, cwd: Path, rules: list[Rule]) -> list[Path]:
        rules_dir = cwd / self.rules_dir
        create_dir(rules_dir)

        written: list[Path] = []
        for rule in rules:
            if not rule.parent:
                logger.debug("Cursor: skipping rule without parent: %s", rule.id)
                continue
            path = rules_dir / f"{rule.parent}-{rule.id}.mdc"
            write_file(path, render_cursor_rule(rule))
            written.append(path)
        return written

    async def configure_mcps(self, cwd: Path, mcps: dict[str, MCPConfig]) -> Path | None:
        if not mcps:
            return None
        path = cwd / self.mcp_config_path
        merge_mcp_servers(path, self.mcp_servers_key, mcps)
        return path
