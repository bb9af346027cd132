from pathlib import Path

from rich.table import Column, Table

from agent_installer.agents.models import InstallResult
from agent_installer.tui.enums import UIStyle
from agent_installer.utils import compact_home_path


class InstallTable:
    @staticmethod
    def result_table(result: InstallResult) -> Table:
        table = Table(
            Column(header="Kind", width=10),
            Column(header="Path", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        table.add_row("identity", compact_home_path(result.identity))
        for path in result.skills:
            table.add_row("skill", compact_home_path(path))
        if result.registry is not None:
            table.add_row("mcp", compact_home_path(result.registry))
        return table

    @staticmethod
    def removed_table(removed: list[Path]) -> Table:
        table = Table(
            Column(header="Removed", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for path in removed:
            table.add_row(compact_home_path(path))
        return table


class TargetsTable:
    @staticmethod
    def table(rows: list[dict[str, str]]) -> Table:
        table = Table(
            Column(header="Target", width=10),
            Column(header="Label", width=14),
            Column(header="Directory", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for row in rows:
            directory = row.get("directory", "")
            error = row.get("error")
            if error:
                directory = f"[{UIStyle.RED.value}]{error}[/{UIStyle.RED.value}]"
            else:
                directory = compact_home_path(directory)
            table.add_row(row["target"], row["label"], directory)
        return table
