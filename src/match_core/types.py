# Area: Match Setup
"""
match_core.types — TypedDict schemas for the wire form of match records
========================================================================

Documents the exact structure of the dictionaries produced by
``MatchData.to_dict()``, ``InitialState.to_dict()`` and
``CreateMatchResult.to_dict()``. Persistence and transport layers store
and send these shapes.

Keys that are absent on a record (no setup data, no password, an open
seat's name) are left out of the dictionary entirely rather than set
to ``None``.

    >>> MatchDataDict.__annotations__["gameName"]
    <class 'str'>
"""

from typing import Any, Dict, List, Optional, TypedDict


# ============================================
# Match metadata
# ============================================

class _PlayerRecordRequired(TypedDict):
    id: int                 # slot index, equal to the record's key


class PlayerRecordDict(_PlayerRecordRequired, total=False):
    """One seat of a match. A seat without ``name`` is open."""
    name: str
    credentials: str
    data: Any
    isConnected: bool


class _MatchDataRequired(TypedDict):
    gameName: str
    unlisted: bool
    players: Dict[str, PlayerRecordDict]    # "0".."n-1", in slot order
    createdAt: int                          # epoch milliseconds
    updatedAt: int                          # epoch milliseconds


class MatchDataDict(_MatchDataRequired, total=False):
    """Persistent metadata of one match.

    Fields
    ------
    setupData : Any
        Present only when the creator supplied a payload (even ``None``).
    password : str
        Opaque access secret.
    nextMatchID : str
        Set by the storage layer when a follow-up match is created.
    """
    setupData: Any
    password: str
    nextMatchID: str


# ============================================
# Initial state
# ============================================

class MatchContextDict(TypedDict):
    numPlayers: int
    turn: int
    currentPlayer: str
    playOrder: List[str]
    playOrderPos: int
    phase: Optional[str]
    activePlayers: Optional[Dict[str, str]]


class InitialStateDict(TypedDict):
    G: Any
    ctx: MatchContextDict
    _stateID: int


# ============================================
# create_match() result
# ============================================

class MatchCreatedDict(TypedDict):
    metadata: MatchDataDict
    initialState: Any


class SetupDataErrorDict(TypedDict):
    setupDataError: str
