"""MCP server configuration model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class MCPConfig(BaseModel):
    """A stdio MCP server entry, passed through to agent configuration files."""

    model_config = ConfigDict(frozen=True)

    type: Literal["stdio"]
    command: str = Field(..., min_length=1)
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)
