"""Kit and preset models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sidekit.models.rule import Rule


class Preset(BaseModel):
    """A named, ordered list of rule ids from the same kit."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str | None = None
    rules: list[str]


class Kit(BaseModel):
    """A collection of rules and presets, as described by sidekit.json.

    A kit's identity is the id it was resolved under; it is not stored here.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str | None = None
    rules: list[Rule] = Field(default_factory=list)
    presets: dict[str, Preset] = Field(default_factory=dict)
    folders: list[str] | None = None

    @field_validator("presets", mode="before")
    @classmethod
    def upgrade_legacy_presets(cls, value: Any) -> Any:
        """Accept the legacy `{preset_id: [rule_id, ...]}` shape.

        Each bare list becomes `{"name": preset_id, "rules": [...]}`.
        """
        if not isinstance(value, dict):
            return value
        upgraded: dict[str, Any] = {}
        for preset_id, preset in value.items():
            if isinstance(preset, list):
                upgraded[preset_id] = {"name": preset_id, "rules": preset}
            else:
                upgraded[preset_id] = preset
        return upgraded

    def find_rule(self, rule_id: str) -> Rule | None:
        """Return the rule of type "rule" with the given id, if the kit has one."""
        for rule in self.rules:
            if rule.id == rule_id and rule.type == "rule":
                return rule
        return None

    def documentation_rules(self) -> list[Rule]:
        """Return the kit's documentation entries in declaration order."""
        return [rule for rule in self.rules if rule.type == "documentation"]


class RegistryEntry(BaseModel):
    """One kit listed in the remote registry index."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str | None = None


class RegistryIndex(BaseModel):
    """The remote registry.json document."""

    model_config = ConfigDict(frozen=True)

    kits: list[RegistryEntry]
