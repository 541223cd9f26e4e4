"""Add command: reference rules, presets or docs from a kit."""

import asyncio

import click

from sidekit.cli.commands.generate import report_written
from sidekit.cli.output import user_output
from sidekit.context import SidekitContext
from sidekit.error_boundary import cli_error_boundary
from sidekit.exceptions import PresetNotFoundError, RuleNotFoundError
from sidekit.models import Kit
from sidekit.pipeline import run_generation
from sidekit.project import add_config_refs
from sidekit.rules.references import REF_SEPARATOR


@click.command("add")
@click.argument("kit_id")
@click.option("--rule", "-r", "rule_ids", multiple=True, help="Rule id to add (repeatable)")
@click.option("--preset", "-p", "preset_ids", multiple=True, help="Preset id to add (repeatable)")
@click.option("--docs", is_flag=True, help="Add the kit's documentation entries")
@click.option("--no-generate", is_flag=True, help="Only update the configuration")
@click.pass_obj
@cli_error_boundary
def add_cmd(
    ctx: SidekitContext,
    kit_id: str,
    rule_ids: tuple[str, ...],
    preset_ids: tuple[str, ...],
    docs: bool,
    no_generate: bool,
) -> None:
    """Add rules and presets from KIT_ID to the configuration, then regenerate.

    Without --rule, --preset or --docs, lists what the kit provides.

    Examples:

        sidekit add adonisjs --preset recommended

        sidekit add adonisjs --rule structure --rule naming
    """
    kit = asyncio.run(ctx.resolver.resolve(kit_id))

    if not rule_ids and not preset_ids and not docs:
        show_kit(kit_id, kit)
        return

    for rule_id in rule_ids:
        if kit.find_rule(rule_id) is None:
            raise RuleNotFoundError(rule_id, f"{kit_id} kit does not provide this rule")
    for preset_id in preset_ids:
        if preset_id not in kit.presets:
            raise PresetNotFoundError(preset_id, f"kit '{kit_id}' does not provide this preset")

    add_config_refs(
        ctx.cwd,
        rules=[f"{kit_id}{REF_SEPARATOR}{rule_id}" for rule_id in rule_ids],
        presets=[f"{kit_id}{REF_SEPARATOR}{preset_id}" for preset_id in preset_ids],
        docs=[kit_id] if docs else [],
    )
    user_output(f"✓ Updated configuration with {kit.name} kit")

    if no_generate:
        return

    written = asyncio.run(run_generation(ctx))
    report_written(ctx, written)


def show_kit(kit_id: str, kit: Kit) -> None:
    user_output(f"{kit.name} ({kit_id})")
    if kit.description:
        user_output(f"  {kit.description}")

    if kit.presets:
        user_output("\nPresets:")
        for preset_id, preset in kit.presets.items():
            user_output(f"  {preset_id}: {', '.join(preset.rules)}")

    rules = [rule for rule in kit.rules if rule.type == "rule"]
    if rules:
        user_output("\nRules:")
        for rule in rules:
            suffix = f" - {rule.description}" if rule.description else ""
            user_output(f"  {rule.id}: {rule.name}{suffix}")

    if kit.documentation_rules():
        user_output(f"\nDocumentation entries: {len(kit.documentation_rules())}")
