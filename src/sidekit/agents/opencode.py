"""opencode agent."""

from pathlib import Path

from sidekit.agents.grouped import GroupedFileAgent


class OpencodeAgent(GroupedFileAgent):
    """Writes AGENTS.md and opencode.json."""

    name = "opencode"
    label = "opencode"
    rules_path = Path("AGENTS.md")
    mcp_config_path = Path("opencode.json")
    mcp_servers_key = "mcp"
