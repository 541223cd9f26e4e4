"""Registry of known agents."""

from sidekit.agents.abc import Agent


class AgentRegistry:
    """Agents available for generation, keyed by name.

    New agents are added with register(); the generation dispatcher only
    looks agents up by name.
    """

    def __init__(self, agents: list[Agent] | None = None) -> None:
        self._agents: dict[str, Agent] = {}
        for agent in agents or []:
            self.register(agent)

    def register(self, agent: Agent) -> None:
        """Add an agent.

        Raises:
            ValueError: If an agent with the same name is already registered
        """
        if agent.name in self._agents:
            raise ValueError(f"Agent already registered: {agent.name}")
        self._agents[agent.name] = agent

    def get(self, name: str) -> Agent | None:
        return self._agents.get(name)

    def names(self) -> list[str]:
        return list(self._agents)


def create_default_agent_registry() -> AgentRegistry:
    """Create a registry with every built-in agent."""
    from sidekit.agents.claude import ClaudeAgent
    from sidekit.agents.copilot import CopilotAgent
    from sidekit.agents.cursor import CursorAgent
    from sidekit.agents.opencode import OpencodeAgent

    return AgentRegistry([ClaudeAgent(), OpencodeAgent(), CopilotAgent(), CursorAgent()])
