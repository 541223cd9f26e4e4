"""Claude Code agent."""

from pathlib import Path

from sidekit.agents.grouped import GroupedFileAgent


class ClaudeAgent(GroupedFileAgent):
    """Writes CLAUDE.md and .mcp.json."""

    name = "claude"
    label = "Claude Code"
    rules_path = Path("CLAUDE.md")
    mcp_config_path = Path(".mcp.json")
    mcp_servers_key = "mcpServers"
