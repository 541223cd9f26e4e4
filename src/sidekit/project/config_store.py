"""Load and persist the project's .sidekit/config.json."""

from pathlib import Path

from sidekit.io import read_json_document, write_json_document
from sidekit.models import SidekitConfig
from sidekit.settings import CONFIG_FILENAME, CONFIG_SCHEMA_URL, SIDEKIT_DIR


def get_config_path(cwd: Path) -> Path:
    return cwd / SIDEKIT_DIR / CONFIG_FILENAME


def dedupe(values: list[str]) -> list[str]:
    """Remove duplicates, keeping the first occurrence of each value."""
    return list(dict.fromkeys(values))


def load_config(cwd: Path) -> SidekitConfig:
    """Load the project configuration.

    Raises:
        FileError: If the config file is missing or unreadable
        InvalidSchemaError: If the config does not match the schema
    """
    return read_json_document(get_config_path(cwd), SidekitConfig)


def update_config(cwd: Path, config: SidekitConfig) -> SidekitConfig:
    """Persist the project configuration and return what was written.

    The written document starts with the `$schema` pointer, and its `rules`
    and `presets` arrays are de-duplicated in first-seen order. The file is
    replaced atomically.
    """
    normalized = config.model_copy(
        update={"rules": dedupe(config.rules), "presets": dedupe(config.presets)}
    )

    data = {"$schema": CONFIG_SCHEMA_URL, **normalized.model_dump(mode="json")}
    write_json_document(get_config_path(cwd), data)
    return normalized


def add_config_refs(
    cwd: Path,
    *,
    rules: list[str] | None = None,
    presets: list[str] | None = None,
    docs: list[str] | None = None,
) -> SidekitConfig:
    """Append references to the project configuration and persist it."""
    config = load_config(cwd).with_refs(rules=rules, presets=presets, docs=docs)
    return update_config(cwd, config)
