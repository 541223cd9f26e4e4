"""Loading of concrete rules from references, presets and documentation kits.

References are resolved one after another so that later lookups of the same
kit are served from the resolver's cache.
"""

import logging
from pathlib import Path

from sidekit.exceptions import FileError, InvalidSchemaError, PresetNotFoundError, RuleNotFoundError
from sidekit.io import parse_rule, read_file
from sidekit.kits import KitResolver
from sidekit.models import Rule
from sidekit.rules.references import (
    REF_SEPARATOR,
    LocalRuleRef,
    RemoteRuleRef,
    normalize_rule_ref,
)
from sidekit.settings import SIDEKIT_DIR

logger = logging.getLogger(__name__)


async def load_rule(store_root: Path, ref: str, resolver: KitResolver) -> Rule:
    """Resolve a single rule reference.

    Remote references (`kit_id:rule_id`) are looked up among the kit's rules;
    local references are read from `<store_root>/.sidekit/<path>`.

    Raises:
        RuleNotFoundError: If the kit has no such rule, or the local file is
            missing or invalid
        KitNotFoundError: If the referenced kit cannot be resolved
    """
    normalized = normalize_rule_ref(ref)

    match normalized:
        case RemoteRuleRef(kit_id=kit_id, rule_id=rule_id):
            kit = await resolver.resolve(kit_id)
            rule = kit.find_rule(rule_id)
            if rule is None:
                raise RuleNotFoundError(ref, f"{kit_id} kit does not provide this rule")
            return rule

        case LocalRuleRef(path=path):
            rule_path = store_root / SIDEKIT_DIR / path
            try:
                return parse_rule(Path(path).stem, read_file(rule_path), source=str(rule_path))
            except (FileError, InvalidSchemaError) as e:
                raise RuleNotFoundError(ref, str(e)) from e


async def load_preset_rules(store_root: Path, ref: str, resolver: KitResolver) -> list[Rule]:
    """Expand a `kit_id:preset_id` reference into its rules, in preset order.

    Preset members always resolve against the preset's own kit.

    Raises:
        PresetNotFoundError: If the reference is malformed or the kit has no
            such preset
        RuleNotFoundError: If a preset member is missing from the kit
    """
    normalized = normalize_rule_ref(ref)
    if not isinstance(normalized, RemoteRuleRef):
        raise PresetNotFoundError(ref, "preset references must be written as <kit>:<preset>")

    kit = await resolver.resolve(normalized.kit_id)
    preset = kit.presets.get(normalized.rule_id)
    if preset is None:
        raise PresetNotFoundError(ref, f"kit '{normalized.kit_id}' does not provide this preset")

    rules = []
    for rule_id in preset.rules:
        member_ref = f"{normalized.kit_id}{REF_SEPARATOR}{rule_id}"
        rules.append(await load_rule(store_root, member_ref, resolver))
    return rules


async def load_docs_rules(kit_id: str, resolver: KitResolver) -> list[Rule]:
    """Return the documentation entries of a kit."""
    kit = await resolver.resolve(kit_id)
    return kit.documentation_rules()


async def load_rules(
    store_root: Path,
    *,
    rules: list[str],
    presets: list[str],
    docs: list[str],
    resolver: KitResolver,
) -> list[Rule]:
    """Load every referenced rule, in order: rules, then presets, then docs.

    The result is not de-duplicated: a rule referenced directly and through a
    preset appears twice.
    """
    output: list[Rule] = []

    for ref in rules:
        output.append(await load_rule(store_root, ref, resolver))

    for ref in presets:
        output.extend(await load_preset_rules(store_root, ref, resolver))

    for kit_id in docs:
        output.extend(await load_docs_rules(kit_id, resolver))

    logger.debug(
        "Loaded %d rules from %d rule refs, %d presets, %d doc kits",
        len(output),
        len(rules),
        len(presets),
        len(docs),
    )
    return output
