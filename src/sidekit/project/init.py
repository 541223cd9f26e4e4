"""Project initialization."""

from pathlib import Path

from sidekit.io import create_dir, stringify_rule, write_file
from sidekit.models import Rule, SidekitConfig
from sidekit.project.config_store import update_config
from sidekit.settings import RULES_DIR, SIDEKIT_DIR

INTRODUCTION_RULE = Rule(
    id="introduction",
    name="Introduction",
    description=(
        "This file is used as the header and introduction for coding agents. "
        "You might want to add some introduction about your project and repository."
    ),
    type="rule",
    content=(
        "# Agent guidelines and rules\n"
        "\n"
        "This file provides guidance to coding agents when working with code in this "
        "repository.\n"
    ),
)


def init_sidekit(cwd: Path, agents: list[str]) -> SidekitConfig:
    """Create .sidekit/ with a config and an introduction rule.

    Returns:
        The configuration that was written
    """
    sidekit_dir = cwd / SIDEKIT_DIR
    create_dir(sidekit_dir / RULES_DIR)

    config = update_config(
        cwd,
        SidekitConfig(
            agents=agents,
            rules=[f"{RULES_DIR}/{INTRODUCTION_RULE.id}.md"],
            presets=[],
            docs=[],
            mcps={},
        ),
    )

    write_file(
        sidekit_dir / RULES_DIR / f"{INTRODUCTION_RULE.id}.md",
        stringify_rule(INTRODUCTION_RULE),
    )
    return config
