# Area: Match Setup
"""
match_core.players — Player slot queries
========================================

Read-only helpers over a match's ``players`` mapping, used by the join
flow to pick a seat. Seats are accepted either as ``PlayerRecord``
models or as plain dicts loaded from storage.
"""

from typing import Any, Mapping, Optional


def get_num_players(players: Mapping[str, Any]) -> int:
    """Given players, return the count of players."""
    return len(players)


def get_first_available_player_id(players: Mapping[str, Any]) -> Optional[str]:
    """
    Return the ID of the lowest-index open seat, or None if every seat
    already has a name.
    """
    for index in range(get_num_players(players)):
        player_id = str(index)
        record = players[player_id] if player_id in players else players[index]
        if _seat_name(record) is None:
            return player_id
    return None


def _seat_name(record: Any) -> Optional[str]:
    if isinstance(record, Mapping):
        return record.get("name")
    return getattr(record, "name", None)
