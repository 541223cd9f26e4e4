"""GitHub Copilot agent."""

from pathlib import Path

from sidekit.agents.grouped import GroupedFileAgent


class CopilotAgent(GroupedFileAgent):
    """Writes .github/copilot-instructions.md and .vscode/mcp.json."""

    name = "copilot"
    label = "GitHub Copilot"
    rules_path = Path(".github") / "copilot-instructions.md"
    mcp_config_path = Path(".vscode") / "mcp.json"
    mcp_servers_key = "servers"
