"""Resolve per-target configuration directories."""

from __future__ import annotations

import os
from pathlib import Path

from agent_installer.errors import ConfigDirNotFoundError
from agent_installer.targets import Target, target_metadata


def home_override(target: Target) -> Path | None:
    """Return the config dir set through the target's env variable, if any."""
    env_name = target_metadata(target).home_env
    if not env_name:
        return None
    override = os.environ.get(env_name, "").strip()
    return Path(override).expanduser() if override else None


def user_home(target: Target) -> Path:
    try:
        return Path.home()
    except RuntimeError as exc:
        raise ConfigDirNotFoundError(target_metadata(target).target, str(exc)) from exc


def resolve_base_dir(
    target: Target, global_: bool = True, project_root: Path | None = None
) -> Path:
    metadata = target_metadata(target)
    if not global_:
        return (project_root or Path.cwd()) / metadata.config_dir_name

    if project_root is not None:
        raise ValueError("project_root is not supported for global scope")

    override = home_override(metadata.target)
    if override is not None:
        return override
    return user_home(metadata.target) / metadata.config_dir_name
