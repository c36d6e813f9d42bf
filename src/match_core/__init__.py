"""
match_core — Match setup core
=============================

Creates the metadata record and initial state of a new multiplayer
match, validating the custom setup payload first, and finds open seats
for players joining an existing match.

Quick Start:
    from match_core import Game, MatchCreated, create_match

    chess = Game(name="chess")
    result = create_match(chess, num_players=2)
    if isinstance(result, MatchCreated):
        save(result.metadata.to_dict(), result.initial_state.to_dict())

Joining:
    from match_core import get_first_available_player_id

    seat = get_first_available_player_id(metadata.players)
    if seat is None:
        ...  # match is full
"""

from .game import Game, SetupDataValidator, GameSetup
from .models import MatchData, PlayerRecord
from .metadata import MISSING, create_metadata
from .initial_state import InitialState, MatchContext, StateInitializer, initialize_game
from .match import (
    CreateMatchResult,
    MatchCreated,
    SetupDataRejected,
    create_match,
    resolve_num_players,
)
from .players import get_first_available_player_id, get_num_players
from .errors import MatchCoreError, SetupDataInvalidError, ConfigError
from ._logging_config import setup_logging

__all__ = [
    # Game descriptor
    "Game",
    "SetupDataValidator",
    "GameSetup",
    # Records
    "MatchData",
    "PlayerRecord",
    "InitialState",
    "MatchContext",
    # Match creation
    "MISSING",
    "create_metadata",
    "initialize_game",
    "StateInitializer",
    "create_match",
    "resolve_num_players",
    "CreateMatchResult",
    "MatchCreated",
    "SetupDataRejected",
    # Seats
    "get_num_players",
    "get_first_available_player_id",
    # Errors
    "MatchCoreError",
    "SetupDataInvalidError",
    "ConfigError",
    # Logging
    "setup_logging",
]
__version__ = "1.0.0"
