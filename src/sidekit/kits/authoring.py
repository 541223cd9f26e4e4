"""Authoring of kit descriptors (sidekit.json)."""

import logging
import re
from pathlib import Path

from sidekit.io import (
    create_dir,
    parse_rule,
    read_file,
    read_json_document,
    stringify_rule,
    write_file,
    write_json_document,
)
from sidekit.models import Kit, Rule
from sidekit.settings import KIT_FILENAME, KIT_SCHEMA_URL, RULES_DIR

logger = logging.getLogger(__name__)


def load_kit_config(kit_dir: Path) -> Kit:
    """Load and validate `<kit_dir>/sidekit.json`."""
    return read_json_document(kit_dir / KIT_FILENAME, Kit)


def update_kit_config(kit_dir: Path, kit: Kit) -> None:
    """Write `<kit_dir>/sidekit.json` with its `$schema` pointer."""
    data = {"$schema": KIT_SCHEMA_URL, **kit.model_dump(mode="json", exclude_none=True)}
    write_json_document(kit_dir / KIT_FILENAME, data)


def index_kit(kit_dir: Path) -> Kit:
    """Rebuild the kit's rule list from its markdown folders.

    Every `*.md` file in the kit's folders (`folders` in sidekit.json, or
    `rules/` when unset) becomes a rule whose id is the file stem. Files are
    read in name order per folder. Presets and metadata are kept as-is.
    """
    kit = load_kit_config(kit_dir)
    folders = kit.folders if kit.folders else [RULES_DIR]

    rules: list[Rule] = []
    for folder in folders:
        folder_path = kit_dir / folder
        if not folder_path.is_dir():
            logger.debug("Skipping missing kit folder: %s", folder_path)
            continue
        for rule_path in sorted(folder_path.glob("*.md")):
            rules.append(parse_rule(rule_path.stem, read_file(rule_path), source=str(rule_path)))

    indexed = kit.model_copy(update={"rules": rules})
    update_kit_config(kit_dir, indexed)
    return indexed


def init_kit(kit_dir: Path, name: str, description: str | None = None) -> Kit:
    """Create an empty kit with one example rule, then index it."""
    update_kit_config(kit_dir, Kit(name=name, description=description, rules=[], presets={}))

    rules_dir = kit_dir / RULES_DIR
    create_dir(rules_dir)

    example = Rule(
        id="example",
        parent=_slugify(name),
        name=name,
        description="Example rule",
        type="rule",
        content="## Example rule\n\nThis rule is an example\n",
    )
    write_file(rules_dir / "example.md", stringify_rule(example))

    return index_kit(kit_dir)


def _slugify(name: str) -> str:
    return re.sub(r"\s+", "-", name.strip().lower())
