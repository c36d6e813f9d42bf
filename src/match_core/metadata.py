# Area: Match Setup
"""
match_core.metadata — Match metadata builder
============================================

Builds the ``MatchData`` record for a freshly created match: one open
seat per requested player, visibility, password, timestamps and the
optional setup payload.
"""

import logging
import time
from typing import Any, Dict, Optional

from .game import Game
from .models import MatchData, PlayerRecord

logger = logging.getLogger("match_core.metadata")


class _Missing:
    """Marker for an argument the caller did not pass at all."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def _now_ms() -> int:
    return int(time.time() * 1000)


def build_players(num_players: int) -> Dict[str, PlayerRecord]:
    """Return ``num_players`` open seats keyed ``"0".."n-1"``."""
    return {str(index): PlayerRecord(id=index) for index in range(num_players)}


def create_metadata(
    game: Game,
    num_players: int,
    setup_data: Any = MISSING,
    unlisted: Any = False,
    password: Optional[str] = None,
) -> MatchData:
    """
    Create a new match metadata record.

    Args:
        game: Game descriptor; only its name is used
        num_players: Number of seats to create. Not validated here; a
            count of zero or less yields no seats.
        setup_data: Custom setup payload. Left off the record entirely
            when not passed; passing ``None`` keeps it as a null payload.
        unlisted: Coerced to a strict bool
        password: Optional access secret, stored as-is

    Returns:
        A new ``MatchData`` with ``created_at == updated_at``
    """
    now = _now_ms()
    fields: Dict[str, Any] = dict(
        game_name=game.name,
        unlisted=bool(unlisted),
        password=password,
        players=build_players(num_players),
        created_at=now,
        updated_at=now,
    )
    if setup_data is not MISSING:
        fields["setup_data"] = setup_data

    metadata = MatchData(**fields)
    logger.debug(
        "Metadata built: game=%s players=%d unlisted=%s setup_data=%s",
        game.name, len(metadata.players), metadata.unlisted, metadata.has_setup_data,
    )
    return metadata
