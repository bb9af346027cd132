"""Load agent definitions from YAML and render frontmatter documents."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from agent_installer.agents.models import AgentConfig, AgentIdentity, McpTool, Skill
from agent_installer.constants import AGENT_DEFINITION_FILENAMES
from agent_installer.errors import InstallFileError, InvalidAgentDefinitionError

_SCHEMA_PATH = Path(__file__).resolve().parent / "schema.json"


@lru_cache(maxsize=1)
def _validator() -> Draft202012Validator:
    schema = json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))
    return Draft202012Validator(schema)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def resolve_definition_path(path: Path) -> Path:
    if path.is_dir():
        for filename in AGENT_DEFINITION_FILENAMES:
            candidate = path / filename
            if candidate.exists():
                return candidate
        raise InstallFileError(path, "Missing agent definition file")
    if not path.exists():
        raise InstallFileError(path, "Missing agent definition file")
    return path


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InstallFileError(path, f"Failed to read file ({exc})") from exc


def _load_skill(raw: dict[str, Any], base_dir: Path) -> Skill:
    if "content" in raw:
        content = raw["content"]
    else:
        content = _read_text(base_dir / raw["file"])
    return Skill(name=raw["name"], content=content)


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _load_tool(raw: dict[str, Any]) -> McpTool:
    env = raw.get("env") or {}
    return McpTool(
        name=raw["name"],
        command=raw["command"],
        args=tuple(_scalar_text(arg) for arg in raw.get("args") or []),
        env={str(k): _scalar_text(v) for k, v in env.items()},
        setup_url=raw.get("setup_url"),
    )


def parse_agent(payload: Any, source: Path) -> AgentConfig:
    error = next(iter(_validator().iter_errors(payload)), None)
    if error is not None:
        raise InvalidAgentDefinitionError(source, format_schema_error(error))

    identity_raw = payload["identity"]
    identity = AgentIdentity(
        system_prompt=identity_raw["system_prompt"],
        model=identity_raw.get("model"),
        icon=identity_raw.get("icon"),
    )
    base_dir = source.parent
    return AgentConfig(
        name=payload["name"],
        description=payload.get("description", ""),
        identity=identity,
        skills=tuple(_load_skill(item, base_dir) for item in payload.get("skills", [])),
        mcp=tuple(_load_tool(item) for item in payload.get("mcp", [])),
    )


def load_agent(path: Path) -> AgentConfig:
    source = resolve_definition_path(path)
    try:
        payload = yaml.safe_load(_read_text(source))
    except yaml.YAMLError as exc:
        raise InvalidAgentDefinitionError(source, str(exc)) from exc
    return parse_agent(payload, source)


def render_frontmatter(fields: dict[str, Any], body: str) -> str:
    parts: list[str] = []
    if fields:
        parts.append("---")
        parts.append(
            yaml.dump(
                fields,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
                width=float("inf"),
            ).rstrip()
        )
        parts.append("---")
        parts.append("")

    parts.append(body)
    return "\n".join(parts)
