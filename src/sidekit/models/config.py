"""Project configuration model for .sidekit/config.json."""

from pydantic import BaseModel, ConfigDict, Field

from sidekit.models.mcp import MCPConfig


class SidekitConfig(BaseModel):
    """Declarative project configuration.

    `rules`, `presets` and `docs` hold raw references: either a path relative
    to the .sidekit/ directory or a `kit_id:id` pair.
    """

    model_config = ConfigDict(frozen=True)

    agents: list[str]
    rules: list[str] = Field(default_factory=list)
    presets: list[str] = Field(default_factory=list)
    docs: list[str] = Field(default_factory=list)
    mcps: dict[str, MCPConfig] = Field(default_factory=dict)

    def with_refs(
        self,
        *,
        rules: list[str] | None = None,
        presets: list[str] | None = None,
        docs: list[str] | None = None,
    ) -> "SidekitConfig":
        """Return a new config with the given references appended."""
        return self.model_copy(
            update={
                "rules": [*self.rules, *(rules or [])],
                "presets": [*self.presets, *(presets or [])],
                "docs": [*self.docs, *(docs or [])],
            }
        )
