from agent_installer.agents.models import (
    AgentConfig,
    AgentIdentity,
    InstallResult,
    McpTool,
    Skill,
)
from agent_installer.agents.parser import load_agent, render_frontmatter


__all__ = [
    "AgentConfig",
    "AgentIdentity",
    "InstallResult",
    "McpTool",
    "Skill",
    "load_agent",
    "render_frontmatter",
]
