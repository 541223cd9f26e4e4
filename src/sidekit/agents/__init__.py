"""Agent output formatters."""

from sidekit.agents.abc import Agent
from sidekit.agents.registry import AgentRegistry, create_default_agent_registry

__all__ = ["Agent", "AgentRegistry", "create_default_agent_registry"]
