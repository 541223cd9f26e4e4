"""Init command for creating .sidekit/ in a project."""

import click

from sidekit.cli.output import user_output
from sidekit.context import SidekitContext
from sidekit.error_boundary import cli_error_boundary
from sidekit.project import init_sidekit
from sidekit.project.config_store import get_config_path


@click.command("init")
@click.option(
    "--agent",
    "-a",
    "agents",
    multiple=True,
    default=("claude",),
    show_default=True,
    help="Coding agent to generate files for (repeatable)",
)
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing configuration")
@click.pass_obj
@cli_error_boundary
def init_cmd(ctx: SidekitContext, agents: tuple[str, ...], force: bool) -> None:
    """Initialize sidekit in the project directory.

    Creates .sidekit/config.json and an introduction rule in
    .sidekit/rules/introduction.md.
    """
    config_path = get_config_path(ctx.cwd)
    if config_path.exists() and not force:
        user_output(f"Error: {config_path} already exists")
        user_output("Use --force to overwrite")
        raise SystemExit(1)

    unknown = [name for name in agents if ctx.agents.get(name) is None]
    if unknown:
        known = ", ".join(ctx.agents.names())
        raise ValueError(f"Unknown agent(s): {', '.join(unknown)} (available: {known})")

    init_sidekit(ctx.cwd, list(dict.fromkeys(agents)))

    user_output(f"Created {config_path}")
    user_output("\nAdd rules from a kit with:")
    user_output("  sidekit add <kit-id> --preset <preset>")
