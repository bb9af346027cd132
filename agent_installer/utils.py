import json
import os
import shutil
from pathlib import Path
from typing import Any

from agent_installer.errors import InstallFileError


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_json_safe(path: Path) -> tuple[Any | None, str | None]:
    if not path.exists():
        return None, None
    if path.stat().st_size == 0:
        return None, None
    try:
        return read_json(path), None
    except (OSError, ValueError) as exc:
        return None, str(exc)


def dump_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def write_text_atomic(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` so readers only see the old or new file.

    A symlinked ``path`` is written through: the link stays and its target
    receives the new content.
    """
    if path.is_symlink():
        path = path.resolve()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise InstallFileError(path, f"Failed to create directory ({exc})") from exc

    tmp_path = path.with_name(f".{path.name}.{os.getpid()}.tmp")
    try:
        with tmp_path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise InstallFileError(path, f"Failed to write file ({exc})") from exc


def write_json(path: Path, payload: Any) -> None:
    write_text_atomic(path, dump_json(payload))


def remove_file(path: Path) -> bool:
    if not path.exists() and not path.is_symlink():
        return False
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise InstallFileError(path, f"Failed to remove file ({exc})") from exc
    return True


def remove_tree(path: Path) -> bool:
    if path.is_symlink() or path.is_file():
        return remove_file(path)
    if not path.exists():
        return False
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise InstallFileError(path, f"Failed to remove directory ({exc})") from exc
    return True


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def compact_home_paths_in_text(text: str) -> str:
    home = str(Path.home())
    if text == home:
        return "~"
    return text.replace(f"{home}/", "~/")
