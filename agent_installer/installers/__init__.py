from pathlib import Path

from agent_installer.installers.base import BaseInstaller, IInstaller
from agent_installer.installers.claude import ClaudeInstaller
from agent_installer.installers.codex import CodexInstaller
from agent_installer.installers.cursor import CursorInstaller
from agent_installer.targets import Target
from agent_installer.tui import InstallerConsoleUI


INSTALLERS: dict[Target, type[BaseInstaller]] = {
    Target.CLAUDE: ClaudeInstaller,
    Target.CURSOR: CursorInstaller,
    Target.CODEX: CodexInstaller,
}


def get_installer(
    target: Target,
    global_: bool = True,
    project_root: Path | None = None,
    ui: InstallerConsoleUI | None = None,
) -> IInstaller:
    installer_class = INSTALLERS[target]
    return installer_class.create_default(
        global_=global_, project_root=project_root, ui=ui
    )


__all__ = [
    "BaseInstaller",
    "ClaudeInstaller",
    "CodexInstaller",
    "CursorInstaller",
    "IInstaller",
    "INSTALLERS",
    "get_installer",
]
