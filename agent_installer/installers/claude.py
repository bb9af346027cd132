"""Claude Code installer.

Skills follow the Claude Code skill layout, one directory per skill holding a
``SKILL.md`` with ``name``/``description`` frontmatter. MCP servers are
registered in ``~/.claude.json`` for global installs (inside
``$CLAUDE_CONFIG_DIR`` when that is set) and in the project's
``.mcp.json`` for local ones.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from agent_installer.agents.models import AgentConfig, McpTool, Skill
from agent_installer.agents.parser import render_frontmatter
from agent_installer.constants import SKILLS_DIRNAME
from agent_installer.installers.base import BaseInstaller
from agent_installer.paths import home_override, user_home
from agent_installer.targets import Target

SKILL_FILENAME = "SKILL.md"


class ClaudeInstaller(BaseInstaller):
    TARGET = Target.CLAUDE

    @property
    def registry_path(self) -> Path:
        if not self._global:
            return self.root.parent / ".mcp.json"
        if home_override(self.TARGET) is not None:
            return self.root / ".claude.json"
        return user_home(self.TARGET) / ".claude.json"

    def skills_dir(self, agent_name: str) -> Path:
        return self.root / SKILLS_DIRNAME / agent_name

    def render_skill(self, agent: AgentConfig, skill: Skill) -> str:
        fields = {
            "name": skill.name,
            "description": agent.description or skill.name,
        }
        return render_frontmatter(fields, skill.content)

    def install_skills(self, agent: AgentConfig) -> list[Path]:
        if not agent.skills:
            return []

        skills_dir = self.skills_dir(agent.name)
        return [
            self._write(
                skills_dir / skill.name / SKILL_FILENAME,
                self.render_skill(agent, skill),
            )
            for skill in agent.skills
        ]

    def tool_entry(self, tool: McpTool) -> dict[str, Any]:
        return {"type": "stdio", **super().tool_entry(tool)}
