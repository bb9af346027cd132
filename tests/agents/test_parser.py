"""Tests for the agent definition loader."""

from pathlib import Path

import pytest

from agent_installer.agents.models import McpTool, Skill
from agent_installer.agents.parser import load_agent, render_frontmatter
from agent_installer.errors import InstallFileError, InvalidAgentDefinitionError


FULL_DEFINITION = """\
name: researcher
description: Finds sources
identity:
  system_prompt: |
    You are a careful researcher.
  model: gpt-4.1
  icon: "🔎"
skills:
  - name: citations
    content: Always cite.
  - name: style
    file: skills/style.md
mcp:
  - name: brave
    command: npx
    args: ["-y", "@brave/brave-search-mcp-server"]
    env:
      BRAVE_API_KEY: "${BRAVE_API_KEY}"
      RETRIES: 3
    setup_url: https://brave.com/search/api/
"""


def _write_definition(root: Path, text: str, filename: str = "agent.yaml") -> Path:
    root.mkdir(parents=True, exist_ok=True)
    path = root / filename
    path.write_text(text, encoding="utf-8")
    return path


def test_load_full_definition(tmp_path: Path) -> None:
    path = _write_definition(tmp_path / "researcher", FULL_DEFINITION)
    (path.parent / "skills").mkdir()
    (path.parent / "skills" / "style.md").write_text("# Style\n", encoding="utf-8")

    agent = load_agent(path)

    assert agent.name == "researcher"
    assert agent.description == "Finds sources"
    assert agent.identity.system_prompt == "You are a careful researcher.\n"
    assert agent.identity.model == "gpt-4.1"
    assert agent.identity.icon == "🔎"
    assert agent.skills == (
        Skill("citations", "Always cite."),
        Skill("style", "# Style\n"),
    )
    assert agent.mcp == (
        McpTool(
            name="brave",
            command="npx",
            args=("-y", "@brave/brave-search-mcp-server"),
            env={"BRAVE_API_KEY": "${BRAVE_API_KEY}", "RETRIES": "3"},
            setup_url="https://brave.com/search/api/",
        ),
    )


def test_load_from_directory(tmp_path: Path) -> None:
    _write_definition(
        tmp_path / "minimal",
        "name: minimal\nidentity:\n  system_prompt: Hi\n",
        filename="agent.yml",
    )

    agent = load_agent(tmp_path / "minimal")

    assert agent.name == "minimal"
    assert agent.description == ""
    assert agent.identity.model is None
    assert agent.skills == ()
    assert agent.mcp == ()


def test_missing_definition(tmp_path: Path) -> None:
    with pytest.raises(InstallFileError, match="Missing agent definition"):
        load_agent(tmp_path / "nope.yaml")


def test_directory_without_definition(tmp_path: Path) -> None:
    with pytest.raises(InstallFileError, match="Missing agent definition"):
        load_agent(tmp_path)


def test_schema_violation_reports_location(tmp_path: Path) -> None:
    path = _write_definition(
        tmp_path, "name: researcher\nidentity:\n  model: gpt-4o\n"
    )

    with pytest.raises(InvalidAgentDefinitionError) as exc_info:
        load_agent(path)

    assert "system_prompt" in exc_info.value.detail
    assert exc_info.value.path == path


def test_name_with_separator_is_rejected(tmp_path: Path) -> None:
    path = _write_definition(
        tmp_path, "name: ../evil\nidentity:\n  system_prompt: x\n"
    )

    with pytest.raises(InvalidAgentDefinitionError, match="name"):
        load_agent(path)


def test_yaml_syntax_error(tmp_path: Path) -> None:
    path = _write_definition(tmp_path, "name: [unclosed\n")

    with pytest.raises(InvalidAgentDefinitionError):
        load_agent(path)


def test_missing_skill_file(tmp_path: Path) -> None:
    path = _write_definition(
        tmp_path,
        "name: a\nidentity:\n  system_prompt: x\nskills:\n  - name: s\n    file: gone.md\n",
    )

    with pytest.raises(InstallFileError) as exc_info:
        load_agent(path)

    assert exc_info.value.path == tmp_path / "gone.md"


def test_render_frontmatter_keeps_field_order() -> None:
    text = render_frontmatter({"name": "a", "description": "b: c"}, "body")

    assert text == "---\nname: a\ndescription: 'b: c'\n---\n\nbody"


def test_render_frontmatter_without_fields() -> None:
    assert render_frontmatter({}, "body only") == "body only"


def test_render_frontmatter_keeps_long_values_on_one_line() -> None:
    description = " ".join(["word"] * 40)

    text = render_frontmatter({"name": "a", "description": description}, "body")

    assert text == f"---\nname: a\ndescription: {description}\n---\n\nbody"


def test_boolean_args_and_env_render_lowercase(tmp_path: Path) -> None:
    path = _write_definition(
        tmp_path,
        "name: a\n"
        "identity:\n  system_prompt: x\n"
        "mcp:\n"
        "  - name: t\n"
        "    command: npx\n"
        "    args: [--verbose, true]\n"
        "    env: {DEBUG: false, PORT: 8080}\n",
    )

    tool = load_agent(path).mcp[0]

    assert tool.args == ("--verbose", "true")
    assert dict(tool.env) == {"DEBUG": "false", "PORT": "8080"}
