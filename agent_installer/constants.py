from typing import Final


DEFAULT_ICON: Final[str] = "🤖"

AGENTS_DIRNAME: Final[str] = "agents"
SKILLS_DIRNAME: Final[str] = "skills"
RULES_DIRNAME: Final[str] = "rules"

MCP_SERVERS_KEY: Final[str] = "mcpServers"

AGENT_DEFINITION_FILENAMES: Final[tuple[str, ...]] = (
    "agent.yaml",
    "agent.yml",
)

CODEX_HOME_ENV: Final[str] = "CODEX_HOME"
CLAUDE_CONFIG_DIR_ENV: Final[str] = "CLAUDE_CONFIG_DIR"
