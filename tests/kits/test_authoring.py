"""Tests for kit authoring (init and index)."""

import json
from pathlib import Path

import pytest

from sidekit.exceptions import FileError
from sidekit.kits.authoring import index_kit, init_kit, load_kit_config
from sidekit.settings import KIT_SCHEMA_URL


def test_init_kit_writes_descriptor_and_example(tmp_path: Path) -> None:
    kit = init_kit(tmp_path, "My Kit", "Shared guidelines")

    document = json.loads((tmp_path / "sidekit.json").read_text(encoding="utf-8"))
    assert list(document)[0] == "$schema"
    assert document["$schema"] == KIT_SCHEMA_URL
    assert document["name"] == "My Kit"
    assert document["description"] == "Shared guidelines"

    assert (tmp_path / "rules" / "example.md").exists()
    assert [rule.id for rule in kit.rules] == ["example"]
    assert kit.rules[0].parent == "my-kit"
    assert kit.rules[0].content == "## Example rule\n\nThis rule is an example\n"


def test_index_kit_reads_rules_in_name_order(tmp_path: Path) -> None:
    init_kit(tmp_path, "kit")
    (tmp_path / "rules" / "zeta.md").write_text(
        "---\nname: Zeta\ntype: rule\n---\nZ", encoding="utf-8"
    )
    (tmp_path / "rules" / "alpha.md").write_text(
        "---\nname: Alpha\ntype: documentation\n---\nA", encoding="utf-8"
    )
    (tmp_path / "rules" / "notes.txt").write_text("ignored", encoding="utf-8")

    kit = index_kit(tmp_path)

    assert [rule.id for rule in kit.rules] == ["alpha", "example", "zeta"]
    assert load_kit_config(tmp_path).model_dump() == kit.model_dump()


def test_index_kit_keeps_presets_and_custom_folders(tmp_path: Path) -> None:
    (tmp_path / "sidekit.json").write_text(
        json.dumps(
            {
                "name": "kit",
                "folders": ["guides", "missing"],
                "presets": {"all": ["one"]},
            }
        ),
        encoding="utf-8",
    )
    (tmp_path / "guides").mkdir()
    (tmp_path / "guides" / "one.md").write_text("---\nname: One\ntype: rule\n---\n1")

    kit = index_kit(tmp_path)

    assert [rule.id for rule in kit.rules] == ["one"]
    assert kit.presets["all"].rules == ["one"]
    document = json.loads((tmp_path / "sidekit.json").read_text(encoding="utf-8"))
    assert document["presets"] == {"all": {"name": "all", "rules": ["one"]}}
    assert document["folders"] == ["guides", "missing"]


def test_index_kit_without_descriptor(tmp_path: Path) -> None:
    with pytest.raises(FileError):
        index_kit(tmp_path)
