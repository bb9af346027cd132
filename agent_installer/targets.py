from dataclasses import dataclass
from enum import Enum

from agent_installer.constants import CLAUDE_CONFIG_DIR_ENV, CODEX_HOME_ENV


class Target(str, Enum):
    CLAUDE = "claude"
    CURSOR = "cursor"
    CODEX = "codex"

    @property
    def label(self) -> str:
        return target_metadata(self).label


@dataclass(frozen=True)
class TargetMetadata:
    target: Target
    label: str
    config_dir_name: str
    default_model: str
    home_env: str | None = None


TARGET_CATALOG: dict[Target, TargetMetadata] = {
    Target.CLAUDE: TargetMetadata(
        target=Target.CLAUDE,
        label="Claude Code",
        config_dir_name=".claude",
        default_model="sonnet",
        home_env=CLAUDE_CONFIG_DIR_ENV,
    ),
    Target.CURSOR: TargetMetadata(
        target=Target.CURSOR,
        label="Cursor",
        config_dir_name=".cursor",
        default_model="auto",
    ),
    Target.CODEX: TargetMetadata(
        target=Target.CODEX,
        label="Codex",
        config_dir_name=".codex",
        default_model="gpt-4o",
        home_env=CODEX_HOME_ENV,
    ),
}


def target_metadata(target: Target | str) -> TargetMetadata:
    target_id = target if isinstance(target, Target) else Target(target.lower())
    return TARGET_CATALOG[target_id]


def target_label(target: Target | str) -> str:
    return target_metadata(target).label
