"""Rule reference normalization.

A reference is either `kit_id:rule_id` (remote) or a path relative to the
project's .sidekit/ directory (local). The split happens on the first colon
only, so rule ids may themselves contain colons.
"""

from dataclasses import dataclass

REF_SEPARATOR = ":"


@dataclass(frozen=True)
class RemoteRuleRef:
    """Reference to a rule provided by a kit."""

    kit_id: str
    rule_id: str


@dataclass(frozen=True)
class LocalRuleRef:
    """Reference to a markdown file under the project's .sidekit/ directory."""

    path: str


NormalizedRuleRef = RemoteRuleRef | LocalRuleRef


def normalize_rule_ref(ref: str) -> NormalizedRuleRef:
    """Classify a raw reference string.

    Examples:
        >>> normalize_rule_ref("adonisjs:structure")
        RemoteRuleRef(kit_id='adonisjs', rule_id='structure')
        >>> normalize_rule_ref("rules/introduction.md")
        LocalRuleRef(path='rules/introduction.md')
    """
    if REF_SEPARATOR in ref:
        kit_id, rule_id = ref.split(REF_SEPARATOR, 1)
        return RemoteRuleRef(kit_id=kit_id, rule_id=rule_id)
    return LocalRuleRef(path=ref)
