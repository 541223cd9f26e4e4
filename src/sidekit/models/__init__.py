"""Data models for sidekit."""

from sidekit.models.config import SidekitConfig
from sidekit.models.kit import Kit, Preset, RegistryEntry, RegistryIndex
from sidekit.models.mcp import MCPConfig
from sidekit.models.rule import Rule, RuleType

__all__ = [
    "Kit",
    "MCPConfig",
    "Preset",
    "RegistryEntry",
    "RegistryIndex",
    "Rule",
    "RuleType",
    "SidekitConfig",
]
