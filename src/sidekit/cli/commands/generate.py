"""Generate command: write every agent's files from the project config."""

import asyncio
from pathlib import Path

import click

from sidekit.cli.output import user_output
from sidekit.context import SidekitContext
from sidekit.error_boundary import cli_error_boundary
from sidekit.pipeline import run_generation


@click.command("generate")
@click.pass_obj
@cli_error_boundary
def generate_cmd(ctx: SidekitContext) -> None:
    """Generate agent files from .sidekit/config.json."""
    written = asyncio.run(run_generation(ctx))
    report_written(ctx, written)


def report_written(ctx: SidekitContext, written: list[Path]) -> None:
    user_output(f"✓ Generated {len(written)} file(s)")
    for path in written:
        try:
            display = path.relative_to(ctx.cwd)
        except ValueError:
            display = path
        user_output(f"  {display}")
