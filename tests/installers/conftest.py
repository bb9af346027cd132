import io
from pathlib import Path

import pytest
from rich.console import Console

from agent_installer.agents.models import AgentConfig, AgentIdentity, McpTool, Skill
from agent_installer.tui import InstallerConsoleUI


class RecordingUI(InstallerConsoleUI):
    def __init__(self) -> None:
        self.buffer = io.StringIO()
        super().__init__(Console(file=self.buffer, width=200, color_system=None))

    @property
    def output(self) -> str:
        return self.buffer.getvalue()


class BrokenSinkUI(InstallerConsoleUI):
    def render_setup_notice(self, tool_name: str, url: str) -> None:
        raise BrokenPipeError("stdout closed")


@pytest.fixture
def ui() -> RecordingUI:
    return RecordingUI()


@pytest.fixture
def make_agent():
    def _make(
        name: str = "researcher",
        description: str = "Finds sources",
        system_prompt: str = "You are a careful researcher.\n",
        model: str | None = None,
        icon: str | None = None,
        skills: tuple[Skill, ...] = (),
        mcp: tuple[McpTool, ...] = (),
    ) -> AgentConfig:
        return AgentConfig(
            name=name,
            description=description,
            identity=AgentIdentity(system_prompt=system_prompt, model=model, icon=icon),
            skills=skills,
            mcp=mcp,
        )

    return _make


@pytest.fixture
def config_root(tmp_path: Path) -> Path:
    return tmp_path / "config"


@pytest.fixture
def broken_ui() -> BrokenSinkUI:
    return BrokenSinkUI()
