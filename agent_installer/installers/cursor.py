"""Cursor installer.

Skills become project rules (``rules/{agent}/{skill}.mdc``) that Cursor loads
on request; MCP servers go to ``mcp.json`` next to them.
"""

from __future__ import annotations

from pathlib import Path

from agent_installer.agents.models import AgentConfig, Skill
from agent_installer.agents.parser import render_frontmatter
from agent_installer.constants import RULES_DIRNAME
from agent_installer.installers.base import BaseInstaller
from agent_installer.targets import Target


class CursorInstaller(BaseInstaller):
    TARGET = Target.CURSOR

    @property
    def registry_path(self) -> Path:
        return self.root / "mcp.json"

    def skills_dir(self, agent_name: str) -> Path:
        return self.root / RULES_DIRNAME / agent_name

    def render_skill(self, skill: Skill) -> str:
        return render_frontmatter(
            {"description": skill.name, "alwaysApply": False}, skill.content
        )

    def install_skills(self, agent: AgentConfig) -> list[Path]:
        if not agent.skills:
            return []

        skills_dir = self.skills_dir(agent.name)
        return [
            self._write(skills_dir / f"{skill.name}.mdc", self.render_skill(skill))
            for skill in agent.skills
        ]
