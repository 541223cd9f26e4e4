"""List kits available in the remote registry."""

import asyncio

import click

from sidekit.cli.output import machine_output
from sidekit.context import SidekitContext
from sidekit.error_boundary import cli_error_boundary
from sidekit.io import parse_json_document
from sidekit.models import RegistryIndex
from sidekit.settings import REGISTRY_INDEX_FILENAME


@click.command("list")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: SidekitContext) -> None:
    """List kits published in the registry."""
    document = asyncio.run(ctx.registry.fetch_index())
    index = parse_json_document(document, RegistryIndex, REGISTRY_INDEX_FILENAME)

    for entry in index.kits:
        suffix = f" - {entry.description}" if entry.description else ""
        machine_output(f"{entry.id}\t{entry.name}{suffix}")
