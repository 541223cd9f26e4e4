"""MCP server configuration files."""

from pathlib import Path

from sidekit.io import read_json_object, write_json_document
from sidekit.models import MCPConfig


def merge_mcp_servers(path: Path, servers_key: str, mcps: dict[str, MCPConfig]) -> None:
    """Store MCP servers under `servers_key` in a JSON file.

    Other top-level keys already present in the file are kept. The servers
    mapping itself is replaced.
    """
    data = read_json_object(path)
    data[servers_key] = {name: config.model_dump(mode="json") for name, config in mcps.items()}
    write_json_document(path, data)
