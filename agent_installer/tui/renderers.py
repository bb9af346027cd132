from pathlib import Path

from rich.console import Console, RenderableType
from rich.panel import Panel

from agent_installer.agents.models import InstallResult
from agent_installer.tui.enums import UIStyle
from agent_installer.tui.tables import InstallTable, TargetsTable


class InstallerConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    @staticmethod
    def _target_panel(
        title: str, body: RenderableType, target_label: str, style: UIStyle
    ) -> Panel:
        return Panel(
            body,
            title=title,
            subtitle=target_label,
            border_style=style.value,
            padding=(0, 1),
        )

    @staticmethod
    def _notice_panel(title: str, body: RenderableType, style: UIStyle) -> Panel:
        return Panel(body, title=title, border_style=style.value, padding=(0, 1))

    def render_setup_notice(self, tool_name: str, url: str) -> None:
        link_style = f"underline {UIStyle.BLUE.value}"
        self.console.print(
            self._notice_panel(
                "setup required",
                f"MCP tool [bold]{tool_name}[/bold] needs an API key.\n"
                f"Get it here: [{link_style}]{url}[/{link_style}]",
                UIStyle.CYAN,
            )
        )

    def render_install_result(
        self, agent_name: str, target_label: str, result: InstallResult
    ) -> None:
        self.console.print(
            self._target_panel(
                f"installed {agent_name}",
                InstallTable.result_table(result),
                target_label,
                UIStyle.GREEN,
            )
        )

    def render_uninstall_result(
        self, agent_name: str, target_label: str, removed: list[Path]
    ) -> None:
        if not removed:
            self.console.print(
                self._notice_panel(
                    "uninstall",
                    f"Nothing to remove for [bold]{agent_name}[/bold] in {target_label}.",
                    UIStyle.DIM,
                )
            )
            return
        self.console.print(
            self._target_panel(
                f"uninstalled {agent_name}",
                InstallTable.removed_table(removed),
                target_label,
                UIStyle.YELLOW,
            )
        )
        self.console.print(
            self._notice_panel(
                "note",
                "MCP registry entries are kept; remove them by hand if unused.",
                UIStyle.DIM,
            )
        )

    def render_targets(self, rows: list[dict[str, str]]) -> None:
        self.console.print(
            self._notice_panel("targets", TargetsTable.table(rows), UIStyle.BLUE)
        )
