"""Index a kit's rules into sidekit.json."""

import click

from sidekit.cli.output import user_output
from sidekit.context import SidekitContext
from sidekit.error_boundary import cli_error_boundary
from sidekit.kits.authoring import index_kit


@click.command("index")
@click.pass_obj
@cli_error_boundary
def index_cmd(ctx: SidekitContext) -> None:
    """Index the kit rules."""
    kit = index_kit(ctx.cwd)
    user_output(f"✓ {len(kit.rules)} rules indexed")
