"""Rule references, loading and grouping."""

from sidekit.rules.grouping import GroupedRules, group_rules
from sidekit.rules.loading import load_docs_rules, load_preset_rules, load_rule, load_rules
from sidekit.rules.references import (
    LocalRuleRef,
    NormalizedRuleRef,
    RemoteRuleRef,
    normalize_rule_ref,
)

__all__ = [
    "GroupedRules",
    "LocalRuleRef",
    "NormalizedRuleRef",
    "RemoteRuleRef",
    "group_rules",
    "load_docs_rules",
    "load_preset_rules",
    "load_rule",
    "load_rules",
    "normalize_rule_ref",
]
