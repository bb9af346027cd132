from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar

from agent_installer.agents.models import (
    AgentConfig,
    InstallResult,
    McpTool,
    validate_name,
)
from agent_installer.agents.parser import render_frontmatter
from agent_installer.constants import AGENTS_DIRNAME, DEFAULT_ICON
from agent_installer.paths import resolve_base_dir
from agent_installer.registry import McpRegistryRepository
from agent_installer.targets import Target, target_metadata
from agent_installer.tui import InstallerConsoleUI
from agent_installer.utils import remove_file, remove_tree, write_text_atomic


class IInstaller(ABC):
    @property
    @abstractmethod
    def target(self) -> Target:
        raise NotImplementedError

    @abstractmethod
    def install_identity(self, agent: AgentConfig) -> Path:
        """Write the agent's identity document, replacing any previous one."""

    @abstractmethod
    def install_skills(self, agent: AgentConfig) -> list[Path]:
        """Write one file per skill. Existing files of dropped skills are kept."""

    @abstractmethod
    def install_tools(self, agent: AgentConfig) -> Path | None:
        """Merge the agent's MCP tools into the shared registry."""

    @abstractmethod
    def uninstall(self, agent_name: str) -> list[Path]:
        """Remove identity and skills. Registry entries are left in place."""

    def install(self, agent: AgentConfig) -> InstallResult:
        identity = self.install_identity(agent)
        skills = self.install_skills(agent)
        registry = self.install_tools(agent)
        return InstallResult(identity=identity, skills=skills, registry=registry)


class BaseInstaller(IInstaller):
    TARGET: ClassVar[Target]

    def __init__(
        self,
        root: Path,
        ui: InstallerConsoleUI | None = None,
        global_: bool = True,
    ) -> None:
        self._root = root
        self._ui = ui or InstallerConsoleUI()
        self._global = global_

    @classmethod
    def create_default(
        cls,
        global_: bool = True,
        project_root: Path | None = None,
        ui: InstallerConsoleUI | None = None,
    ) -> "BaseInstaller":
        root = resolve_base_dir(cls.TARGET, global_=global_, project_root=project_root)
        return cls(root=root, ui=ui, global_=global_)

    @property
    def target(self) -> Target:
        return self.TARGET

    @property
    def root(self) -> Path:
        return self._root

    @property
    def agents_dir(self) -> Path:
        return self.root / AGENTS_DIRNAME

    @property
    @abstractmethod
    def registry_path(self) -> Path:
        raise NotImplementedError

    def identity_path(self, agent_name: str) -> Path:
        return self.agents_dir / f"{agent_name}.md"

    @abstractmethod
    def skills_dir(self, agent_name: str) -> Path:
        raise NotImplementedError

    def identity_fields(self, agent: AgentConfig) -> dict[str, Any]:
        identity = agent.identity
        return {
            "name": agent.name,
            "description": agent.description,
            "model": identity.model or target_metadata(self.target).default_model,
            "icon": identity.icon or DEFAULT_ICON,
        }

    def render_identity(self, agent: AgentConfig) -> str:
        return render_frontmatter(
            self.identity_fields(agent), agent.identity.system_prompt
        )

    def tool_entry(self, tool: McpTool) -> dict[str, Any]:
        return {
            "command": tool.command,
            "args": list(tool.args),
            "env": dict(tool.env),
        }

    def install_identity(self, agent: AgentConfig) -> Path:
        return self._write(self.identity_path(agent.name), self.render_identity(agent))

    def install_tools(self, agent: AgentConfig) -> Path | None:
        if not agent.mcp:
            return None

        registry = McpRegistryRepository(self.registry_path)
        registry.upsert({tool.name: self.tool_entry(tool) for tool in agent.mcp})

        for tool in agent.mcp:
            if tool.setup_url:
                self._notify_setup(tool)
        return registry.path

    def uninstall(self, agent_name: str) -> list[Path]:
        validate_name(agent_name, "Agent")
        removed: list[Path] = []
        identity = self.identity_path(agent_name)
        if remove_file(identity):
            removed.append(identity)
        skills = self.skills_dir(agent_name)
        if remove_tree(skills):
            removed.append(skills)
        return removed

    def _write(self, path: Path, content: str) -> Path:
        write_text_atomic(path, content)
        return path

    def _notify_setup(self, tool: McpTool) -> None:
        # advisory only; a closed output stream must not fail the install
        try:
            self._ui.render_setup_notice(tool.name, tool.setup_url or "")
        except OSError:
            pass
