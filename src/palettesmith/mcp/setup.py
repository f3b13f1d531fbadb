"""
Registering the palettesmith MCP server with Claude Code.

The server is written into the ``mcpServers`` table of Claude Code's
``mcp_servers.json``. An entry launches ``python -m palettesmith.mcp`` with
the interpreter that ran the registration, optionally followed by the
``palettesmith.toml`` the server should load.
"""

from __future__ import annotations

import json
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

SERVER_KEY = "palettesmith"
SERVER_MODULE = "palettesmith.mcp"

# Relative to the home directory, most specific first
CONFIG_LOCATIONS: tuple[tuple[str, ...], ...] = (
    (".config", "claude-code", "mcp_servers.json"),
    (".claude", "mcp_servers.json"),
    ("Library", "Application Support", "Claude Code", "mcp_servers.json"),
)
_FALLBACK_LOCATION = (".claude", "mcp_servers.json")


class RegistrationState(StrEnum):
    NOT_REGISTERED = "not_registered"
    REGISTERED = "registered"
    STALE = "stale"
    ERROR = "error"


class RegistrationStatus(BaseModel):
    """What ``mcp_servers.json`` says about the palettesmith entry.

    ``STALE`` means an entry exists but launches a different interpreter
    or module than a fresh registration would, e.g. after the virtualenv
    palettesmith was registered from has been recreated elsewhere.
    """

    model_config = ConfigDict(frozen=True)

    state: RegistrationState
    config_path: Path | None
    server_command: str | None = None
    tools: list[str]
    error: str | None = None

    @property
    def registered(self) -> bool:
        return self.state in (RegistrationState.REGISTERED, RegistrationState.STALE)


def get_claude_config_path(home: Path | None = None) -> Path:
    """
    Locate Claude Code's ``mcp_servers.json``.

    Returns the first candidate in ``CONFIG_LOCATIONS`` whose directory
    exists. When none does, ``~/.claude`` is created and its
    ``mcp_servers.json`` returned. The file itself may not exist yet.
    """
    home = home or Path.home()
    for parts in CONFIG_LOCATIONS:
        path = home.joinpath(*parts)
        if path.parent.is_dir():
            return path

    default = home.joinpath(*_FALLBACK_LOCATION)
    default.parent.mkdir(parents=True, exist_ok=True)
    return default


def server_entry(palette_config: Path | None = None) -> dict[str, Any]:
    """The ``mcpServers`` entry that launches this server."""
    args = ["-m", SERVER_MODULE]
    if palette_config is not None:
        args.append(str(palette_config.resolve()))
    return {"command": sys.executable, "args": args, "env": {}, "autoStart": True}


def _read_servers_file(path: Path) -> dict[str, Any]:
    """Parse ``path``; a missing file reads as an empty server table.

    Raises:
        ValueError: If the file is not a JSON object.
    """
    if not path.exists():
        return {"mcpServers": {}}

    data = json.loads(path.read_text())
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    return data


def register_mcp_server(
    force: bool = False,
    config_path: Path | None = None,
    palette_config: Path | None = None,
) -> bool:
    """
    Add the palettesmith entry to ``mcp_servers.json``.

    Other servers in the file are kept. An unreadable file is replaced.

    Args:
        force: Overwrite an existing palettesmith entry
        config_path: File to update (default: ``get_claude_config_path()``)
        palette_config: ``palettesmith.toml`` the server should load

    Returns:
        True if the entry is present afterwards, False if writing failed
    """
    config_path = config_path or get_claude_config_path()

    try:
        existing = _read_servers_file(config_path)
    except ValueError as e:
        logger.warning("Replacing unreadable MCP config at %s: %s", config_path, e)
        existing = {"mcpServers": {}}

    servers = existing.setdefault("mcpServers", {})
    if SERVER_KEY in servers and not force:
        logger.info("%s already registered in %s", SERVER_KEY, config_path)
        return True

    servers[SERVER_KEY] = server_entry(palette_config)
    try:
        config_path.write_text(json.dumps(existing, indent=2))
    except OSError as e:
        logger.error("Could not write %s: %s", config_path, e)
        return False

    logger.info("Registered %s in %s", SERVER_KEY, config_path)
    return True


def check_mcp_server(config_path: Path | None = None) -> RegistrationStatus:
    """Report whether, and how, palettesmith is registered."""
    from palettesmith.mcp.server.tools import TOOL_NAMES

    config_path = config_path or get_claude_config_path()
    tools = list(TOOL_NAMES)

    try:
        servers = _read_servers_file(config_path).get("mcpServers", {})
    except ValueError as e:
        return RegistrationStatus(
            state=RegistrationState.ERROR, config_path=config_path, tools=tools, error=str(e)
        )

    entry = servers.get(SERVER_KEY)
    if entry is None:
        return RegistrationStatus(
            state=RegistrationState.NOT_REGISTERED, config_path=config_path, tools=tools
        )

    command = entry.get("command", "")
    args = entry.get("args", [])
    current = command == sys.executable and args[:2] == ["-m", SERVER_MODULE]
    return RegistrationStatus(
        state=RegistrationState.REGISTERED if current else RegistrationState.STALE,
        config_path=config_path,
        server_command=" ".join([command, *args]),
        tools=tools,
    )
