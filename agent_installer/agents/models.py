"""Agent data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from agent_installer.errors import InvalidAgentError

_UNSAFE_NAMES = {".", ".."}


def validate_name(value: str, kind: str) -> None:
    if not value or not value.strip():
        raise InvalidAgentError(f"{kind} name must not be empty")
    if "/" in value or "\\" in value or "\0" in value:
        raise InvalidAgentError(f"{kind} name must not contain path separators: {value!r}")
    if value in _UNSAFE_NAMES:
        raise InvalidAgentError(f"{kind} name is not a valid file name: {value!r}")


@dataclass(frozen=True)
class AgentIdentity:
    system_prompt: str
    model: str | None = None
    icon: str | None = None


@dataclass(frozen=True)
class Skill:
    name: str
    content: str

    def __post_init__(self) -> None:
        validate_name(self.name, "Skill")


@dataclass(frozen=True)
class McpTool:
    name: str
    command: str
    args: tuple[str, ...] = ()
    env: Mapping[str, str] = field(default_factory=dict)
    setup_url: str | None = None

    def __post_init__(self) -> None:
        validate_name(self.name, "MCP tool")
        object.__setattr__(self, "args", tuple(str(arg) for arg in self.args))
        object.__setattr__(
            self,
            "env",
            MappingProxyType({str(k): str(v) for k, v in dict(self.env).items()}),
        )


@dataclass(frozen=True)
class AgentConfig:
    name: str
    description: str
    identity: AgentIdentity
    skills: tuple[Skill, ...] = ()
    mcp: tuple[McpTool, ...] = ()

    def __post_init__(self) -> None:
        validate_name(self.name, "Agent")
        object.__setattr__(self, "skills", tuple(self.skills))
        object.__setattr__(self, "mcp", tuple(self.mcp))


@dataclass
class InstallResult:
    identity: Path
    skills: list[Path] = field(default_factory=list)
    registry: Path | None = None
