"""Grouping of rules by their parent label."""

from dataclasses import dataclass

from sidekit.models import Rule


@dataclass(frozen=True)
class GroupedRules:
    """Rules split into parentless ones and per-parent groups.

    `groups` preserves the order in which each parent label was first seen,
    and the order of rules within each group.
    """

    global_rules: list[Rule]
    groups: dict[str, list[Rule]]


def group_rules(rules: list[Rule]) -> GroupedRules:
    """Partition rules into global rules and groups keyed by parent."""
    global_rules: list[Rule] = []
    groups: dict[str, list[Rule]] = {}

    for rule in rules:
        if not rule.parent:
            global_rules.append(rule)
            continue
        groups.setdefault(rule.parent, []).append(rule)

    return GroupedRules(global_rules=global_rules, groups=groups)
