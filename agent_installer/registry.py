"""Shared MCP tool registry stored as a JSON object on disk.

The registry is read, merged and written back without locking. Two installers
running against the same file at once can lose one of the updates; the last
writer wins for the whole file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from agent_installer.constants import MCP_SERVERS_KEY
from agent_installer.utils import read_json_safe, write_json


class McpRegistryRepository:
    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        payload, _ = read_json_safe(self.path)
        if not isinstance(payload, dict):
            return {}
        return payload

    @staticmethod
    def merge(payload: dict[str, Any], entries: dict[str, dict[str, Any]]) -> dict[str, Any]:
        merged = dict(payload)
        servers = merged.get(MCP_SERVERS_KEY)
        servers = dict(servers) if isinstance(servers, dict) else {}
        for name, entry in entries.items():
            servers[name] = entry
        merged[MCP_SERVERS_KEY] = servers
        return merged

    def save(self, payload: dict[str, Any]) -> None:
        write_json(self.path, payload)

    def upsert(self, entries: dict[str, dict[str, Any]]) -> dict[str, Any]:
        merged = self.merge(self.load(), entries)
        self.save(merged)
        return merged
