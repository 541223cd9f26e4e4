"""Tests for the Cursor agent."""

import json
from pathlib import Path

from sidekit.agents.cursor import CursorAgent, render_cursor_rule
from sidekit.models import MCPConfig
from tests.test_utils.builders import make_rule


def test_render_cursor_rule() -> None:
    rule = make_rule("structure", parent="adonisjs", name="Structure", content="Body\n")

    assert render_cursor_rule(rule) == (
        "---\ndescription: Structure\nalwaysApply: true\n---\nBody\n"
    )


async def test_generate_rules_one_file_per_grouped_rule(tmp_path: Path) -> None:
    rules = [
        make_rule("intro", content="Hello"),
        make_rule("structure", parent="adonisjs", name="Structure", content="S"),
        make_rule("naming", parent="adonisjs", name="Naming", content="N"),
    ]

    written = await CursorAgent().generate_rules(tmp_path, rules)

    rules_dir = tmp_path / ".copilot" / "rules"
    assert written == [rules_dir / "adonisjs-structure.mdc", rules_dir / "adonisjs-naming.mdc"]
    assert sorted(path.name for path in rules_dir.iterdir()) == [
        "adonisjs-naming.mdc",
        "adonisjs-structure.mdc",
    ]
    assert (rules_dir / "adonisjs-naming.mdc").read_text(encoding="utf-8").endswith("---\nN")


async def test_configure_mcps(tmp_path: Path) -> None:
    path = await CursorAgent().configure_mcps(
        tmp_path, {"fs": MCPConfig(type="stdio", command="npx")}
    )

    assert path == tmp_path / ".cursor" / "mcp.json"
    document = json.loads(path.read_text(encoding="utf-8"))
    assert document == {
        "mcpServers": {"fs": {"type": "stdio", "command": "npx", "args": [], "env": {}}}
    }
