import click

from sidekit.cli.commands.kit.index_cmd import index_cmd
from sidekit.cli.commands.kit.init_cmd import init_cmd
from sidekit.cli.commands.kit.list_cmd import list_cmd


@click.group("kit")
def kit_group() -> None:
    """Author and browse sidekit kits."""


kit_group.add_command(init_cmd)
kit_group.add_command(index_cmd)
kit_group.add_command(list_cmd)
