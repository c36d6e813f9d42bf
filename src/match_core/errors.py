# Area: Match Setup
"""
match_core.errors — Custom exception classes
=============================================

Defines the exception hierarchy for the match setup core.
Each exception stores full context for structured logging.

Rejected setup data is normally returned as data (see
``match_core.match.SetupDataRejected``); ``SetupDataInvalidError`` is only
raised when a caller explicitly asks for it via ``unwrap()``.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


class MatchCoreError(Exception):
    """Base exception for all match_core errors."""
    pass


class SetupDataInvalidError(MatchCoreError):
    """Raised when a game's validator rejected the supplied setup data."""

    def __init__(
        self,
        game_name: str,
        num_players: int,
        setup_data: Any,
        message: str,
    ):
        self.game_name = game_name
        self.num_players = num_players
        self.setup_data = setup_data
        self.message = message
        super().__init__(
            f"Setup data for game '{game_name}' rejected: {message}"
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="SETUP_DATA_INVALID",
            subject=f"game={self.game_name} num_players={self.num_players}",
            payload={"setupData": self.setup_data},
            errors=[self.message],
        )


class ConfigError(MatchCoreError):
    """Raised when configuration cannot be loaded or has bad values."""

    def __init__(self, source: str, errors: List[str]):
        self.source = source
        self.errors = errors
        super().__init__(f"Invalid configuration in {source}: {errors}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="CONFIG_ERROR",
            subject=self.source,
            payload=None,
            errors=self.errors,
        )


def _format_error_block(
    error_type: str,
    subject: str,
    payload: Optional[Dict[str, Any]],
    errors: Optional[List[str]],
) -> str:
    """Format a structured, human-readable error block."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        f" MATCH CORE ERROR — {error_type}",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Subject:      {subject}",
    ]

    if payload is not None:
        lines.append("")
        lines.append(" ── PAYLOAD " + "─" * 52)
        lines.append(_indent_json(payload))

    if errors:
        lines.append("")
        lines.append(" ── ERRORS " + "─" * 53)
        for error in errors:
            lines.append(f" • {error}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
