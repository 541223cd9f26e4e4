import logging
from pathlib import Path

import click

from sidekit.cli.commands.add import add_cmd
from sidekit.cli.commands.generate import generate_cmd
from sidekit.cli.commands.init import init_cmd
from sidekit.cli.commands.kit import kit_group
from sidekit.context import create_context
from sidekit.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def configure_logging(debug: bool) -> None:
    logger = logging.getLogger("sidekit")
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option(
    "--cwd",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project directory (defaults to the current directory)",
)
@click.option("--debug", is_flag=True, help="Show debug logs and full stack traces for errors")
@click.pass_context
def cli(ctx: click.Context, cwd: Path | None, debug: bool) -> None:
    """Manage AI guidelines with ease."""
    configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        resolved_cwd = cwd.resolve() if cwd is not None else Path.cwd()
        ctx.obj = create_context(cwd=resolved_cwd, debug=debug)


cli.add_command(init_cmd)
cli.add_command(generate_cmd)
cli.add_command(add_cmd)
cli.add_command(kit_group)


def main() -> None:
    """CLI entry point used by the `sidekit` console script."""
    cli()
