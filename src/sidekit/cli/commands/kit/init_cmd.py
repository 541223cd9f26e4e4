"""Initialize a new kit."""

import click

from sidekit.cli.output import user_output
from sidekit.context import SidekitContext
from sidekit.error_boundary import cli_error_boundary
from sidekit.kits.authoring import init_kit


@click.command("init")
@click.argument("name")
@click.option("--description", "-d", default=None, help="Short description of the kit")
@click.pass_obj
@cli_error_boundary
def init_cmd(ctx: SidekitContext, name: str, description: str | None) -> None:
    """Initialize a new kit named NAME in the project directory."""
    kit = init_kit(ctx.cwd, name, description)
    user_output(f"✓ {kit.name} kit has been initialized ({len(kit.rules)} rule indexed)")
