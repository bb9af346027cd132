from pathlib import Path
from typing import Any


class InstallerError(Exception):
    """Base user-facing installer error."""


class ConfigDirNotFoundError(InstallerError):
    def __init__(self, target: Any, detail: str | None = None) -> None:
        self.target = target
        self.detail = detail
        label = getattr(target, "label", str(target))
        message = f"Could not find {label} configuration directory"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class InvalidAgentError(InstallerError):
    """Agent model violates a naming invariant."""


class InstallFileError(InstallerError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class InvalidAgentDefinitionError(InstallFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid agent definition ({detail})")
