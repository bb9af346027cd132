"""Codex installer.

Layout under the Codex config root (``~/.codex`` or ``$CODEX_HOME``):

- ``agents/{name}.md``: identity with YAML frontmatter
- ``skills/{name}/{skill}.md``: raw skill content
- ``config.json``: ``mcpServers`` registry shared by all agents
"""

from __future__ import annotations

from pathlib import Path

from agent_installer.agents.models import AgentConfig
from agent_installer.constants import SKILLS_DIRNAME
from agent_installer.installers.base import BaseInstaller
from agent_installer.targets import Target


class CodexInstaller(BaseInstaller):
    TARGET = Target.CODEX

    @property
    def registry_path(self) -> Path:
        return self.root / "config.json"

    def skills_dir(self, agent_name: str) -> Path:
        return self.root / SKILLS_DIRNAME / agent_name

    def install_skills(self, agent: AgentConfig) -> list[Path]:
        if not agent.skills:
            return []

        skills_dir = self.skills_dir(agent.name)
        return [
            self._write(skills_dir / f"{skill.name}.md", skill.content)
            for skill in agent.skills
        ]
