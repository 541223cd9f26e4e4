"""Rule markdown parsing and rendering."""

import re
from typing import Any

import yaml
from pydantic import ValidationError

from sidekit.exceptions import InvalidSchemaError
from sidekit.models import Rule

FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)??---[ \t]*(?:\r?\n|\Z)", re.DOTALL
)


def split_frontmatter(text: str) -> tuple[Any, str]:
    """Split markdown into (front matter data, body).

    Returns ({}, text) when the document has no front matter block. The body
    is returned verbatim.

    Raises:
        yaml.YAMLError: If the front matter is not valid YAML
    """
    match = FRONTMATTER_PATTERN.match(text)
    if match is None:
        return {}, text
    data = yaml.safe_load(match.group(1) or "")
    return ({} if data is None else data), text[match.end() :]


def parse_rule(rule_id: str, text: str, *, source: str | None = None) -> Rule:
    """Build a Rule from a markdown document with front matter.

    Args:
        rule_id: Id assigned to the rule
        text: Full markdown document
        source: Path or label used in error messages (defaults to rule_id)

    Raises:
        InvalidSchemaError: If the front matter is malformed or incomplete
    """
    label = source if source is not None else rule_id
    try:
        attributes, body = split_frontmatter(text)
    except yaml.YAMLError as e:
        raise InvalidSchemaError(label, f"  <frontmatter>: invalid YAML: {e}") from e

    if not isinstance(attributes, dict):
        raise InvalidSchemaError(label, "  <frontmatter>: expected a mapping")

    try:
        return Rule.model_validate({**attributes, "id": rule_id, "content": body})
    except ValidationError as e:
        raise InvalidSchemaError.from_validation_error(label, e) from e


def stringify_rule(rule: Rule) -> str:
    """Render a rule as markdown: front matter, then the raw content.

    Front matter fields are written in the order parent, name, description,
    type; optional fields are omitted when unset.
    """
    fields: dict[str, str] = {}
    if rule.parent:
        fields["parent"] = rule.parent
    fields["name"] = rule.name
    if rule.description:
        fields["description"] = rule.description
    fields["type"] = rule.type

    fm_yaml = yaml.dump(fields, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return f"---\n{fm_yaml}---\n{rule.content}"
