"""Builders for rules, kit documents and project layouts used across tests."""

import json
from pathlib import Path
from typing import Any

from sidekit.models import Rule, RuleType


def make_rule(
    rule_id: str,
    *,
    parent: str | None = None,
    name: str | None = None,
    description: str | None = None,
    rule_type: RuleType = "rule",
    content: str = "",
) -> Rule:
    return Rule(
        id=rule_id,
        parent=parent,
        name=name if name is not None else rule_id.title(),
        description=description,
        type=rule_type,
        content=content,
    )


def rule_document(
    rule_id: str,
    *,
    parent: str | None = None,
    name: str | None = None,
    rule_type: RuleType = "rule",
    content: str = "",
) -> dict[str, Any]:
    """Build one entry of a kit's `rules` array, as it appears in sidekit.json."""
    document: dict[str, Any] = {
        "id": rule_id,
        "name": name if name is not None else rule_id.title(),
        "type": rule_type,
        "content": content,
    }
    if parent is not None:
        document["parent"] = parent
    return document


def adonisjs_kit_document() -> dict[str, Any]:
    """A kit with two rules, a documentation entry and a preset."""
    return {
        "name": "AdonisJS",
        "description": "Guidelines for AdonisJS applications",
        "rules": [
            rule_document("structure", parent="adonisjs", content="Structure body"),
            rule_document("naming", parent="adonisjs", content="Naming body"),
            rule_document("docs", parent="adonisjs", rule_type="documentation", content="Docs"),
        ],
        "presets": {
            "recommended": {"name": "Recommended", "rules": ["structure", "naming"]},
        },
    }


def write_project_config(cwd: Path, **config: Any) -> Path:
    """Write .sidekit/config.json under cwd."""
    path = cwd / ".sidekit" / "config.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config), encoding="utf-8")
    return path


def write_local_rule(cwd: Path, relative_path: str, text: str) -> Path:
    """Write a rule markdown file under .sidekit/."""
    path = cwd / ".sidekit" / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
