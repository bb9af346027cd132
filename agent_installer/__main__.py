from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console

from agent_installer.agents import load_agent
from agent_installer.errors import InstallerError
from agent_installer.installers import get_installer
from agent_installer.paths import resolve_base_dir
from agent_installer.targets import Target, target_label
from agent_installer.tui import InstallerConsoleUI
from agent_installer.utils import compact_home_paths_in_text


TARGET_VALUES = [target.value for target in Target]


def _target_option() -> Callable:
    return click.option(
        "--target",
        "-t",
        required=True,
        type=click.Choice(TARGET_VALUES, case_sensitive=False),
        help="Editor to install into.",
    )


def _scope_options(func: Callable) -> Callable:
    func = click.option(
        "--project-root",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Project directory for local installs (default: cwd).",
    )(func)
    func = click.option(
        "--global/--local",
        "global_",
        default=True,
        show_default=True,
        help="Install into the user config or the project config.",
    )(func)
    return func


def _normalize_target(value: str) -> Target:
    return Target(value.lower())


def _check_scope(global_: bool, project_root: Optional[Path]) -> None:
    if global_ and project_root is not None:
        raise click.UsageError("--project-root requires --local")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Install portable agents into Claude Code, Cursor and Codex."""
    ctx.obj = {}


@cli.command(help="Install an agent definition into a target editor.")
@click.argument("path", type=click.Path(path_type=Path))
@_target_option()
@_scope_options
def install(
    path: Path, target: str, global_: bool, project_root: Optional[Path]
) -> None:
    _check_scope(global_, project_root)
    ui = InstallerConsoleUI(Console())
    normalized_target = _normalize_target(target)

    try:
        agent = load_agent(path)
        installer = get_installer(
            normalized_target, global_=global_, project_root=project_root, ui=ui
        )
        result = installer.install(agent)
    except InstallerError as exc:
        raise click.ClickException(compact_home_paths_in_text(str(exc)))

    ui.render_install_result(agent.name, target_label(normalized_target), result)


@cli.command(help="Remove an installed agent's identity and skills.")
@click.argument("name")
@_target_option()
@_scope_options
def uninstall(
    name: str, target: str, global_: bool, project_root: Optional[Path]
) -> None:
    _check_scope(global_, project_root)
    ui = InstallerConsoleUI(Console())
    normalized_target = _normalize_target(target)

    try:
        installer = get_installer(
            normalized_target, global_=global_, project_root=project_root, ui=ui
        )
        removed = installer.uninstall(name)
    except InstallerError as exc:
        raise click.ClickException(compact_home_paths_in_text(str(exc)))

    ui.render_uninstall_result(name, target_label(normalized_target), removed)


@cli.command(help="List supported targets and their config directories.")
@_scope_options
def targets(global_: bool, project_root: Optional[Path]) -> None:
    _check_scope(global_, project_root)
    ui = InstallerConsoleUI(Console())

    rows: list[dict[str, str]] = []
    for target in Target:
        row = {"target": target.value, "label": target_label(target)}
        try:
            row["directory"] = str(
                resolve_base_dir(target, global_=global_, project_root=project_root)
            )
        except InstallerError as exc:
            row["error"] = str(exc)
        rows.append(row)

    ui.render_targets(rows)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
