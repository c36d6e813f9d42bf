# Area: Match Setup
"""
match_core.match — Match creation
=================================

``create_match`` is the single entry point for starting a match:

1. Normalize the seat count (missing or malformed counts become 2).
2. Ask the game's validator, if it has one, about the setup payload.
3. Build the metadata record and the initial state.

A rejected payload is returned as ``SetupDataRejected`` rather than
raised, so callers branch on the result variant:

    result = create_match(game, num_players=4, setup_data=payload)
    if isinstance(result, SetupDataRejected):
        return reply_error(result.error)
    store(result.metadata, result.initial_state)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Literal, Optional, Tuple, Union

from ._config import DEFAULT_NUM_PLAYERS
from .errors import SetupDataInvalidError
from .game import Game
from .initial_state import StateInitializer, initialize_game
from .metadata import MISSING, create_metadata
from .models import MatchData
from .types import MatchCreatedDict, SetupDataErrorDict

logger = logging.getLogger("match_core.match")


@dataclass(frozen=True)
class MatchCreated:
    """Successful creation: both the metadata and the initial state."""
    metadata: MatchData
    initial_state: Any
    kind: Literal["created"] = "created"

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Tuple[MatchData, Any]:
        return self.metadata, self.initial_state

    def to_dict(self) -> MatchCreatedDict:
        state = self.initial_state
        if hasattr(state, "to_dict"):
            state = state.to_dict()
        return {"metadata": self.metadata.to_dict(), "initialState": state}


@dataclass(frozen=True)
class SetupDataRejected:
    """The game's validator refused the setup payload. Nothing was built."""
    error: str
    game_name: str
    num_players: int
    setup_data: Any = None
    kind: Literal["setup_data_error"] = "setup_data_error"

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Tuple[MatchData, Any]:
        raise SetupDataInvalidError(
            game_name=self.game_name,
            num_players=self.num_players,
            setup_data=self.setup_data,
            message=self.error,
        )

    def to_dict(self) -> SetupDataErrorDict:
        return {"setupDataError": self.error}


CreateMatchResult = Union[MatchCreated, SetupDataRejected]


def resolve_num_players(num_players: Any) -> int:
    """
    Return the seat count create_match() will use.

    Falsy, NaN, infinite, boolean and non-numeric values all become
    DEFAULT_NUM_PLAYERS. Fractional counts round up; negative counts
    pass through and produce no seats.
    """
    if isinstance(num_players, bool) or not isinstance(num_players, Real):
        return DEFAULT_NUM_PLAYERS
    if not num_players:
        return DEFAULT_NUM_PLAYERS
    if isinstance(num_players, float) and not math.isfinite(num_players):
        return DEFAULT_NUM_PLAYERS
    return int(math.ceil(num_players))


def create_match(
    game: Game,
    num_players: Any = None,
    setup_data: Any = MISSING,
    unlisted: Any = False,
    password: Optional[str] = None,
    state_initializer: StateInitializer = initialize_game,
) -> CreateMatchResult:
    """
    Create the metadata and initial state for a new match.

    Args:
        game: Game descriptor
        num_players: Requested seat count; see resolve_num_players()
        setup_data: Custom setup payload for the game. When not passed,
            the validator and initializer see None and the metadata
            carries no setup data.
        unlisted: Hide the match from public listings
        password: Optional access secret
        state_initializer: Builds the initial state; defaults to
            initialize_game()

    Returns:
        MatchCreated, or SetupDataRejected if the game's validator
        returned an error message
    """
    resolved = resolve_num_players(num_players)
    if resolved != num_players:
        logger.warning(
            "[%s] num_players=%r normalized to %d", game.name, num_players, resolved,
            extra={"game_name": game.name, "num_players": resolved},
        )

    payload = None if setup_data is MISSING else setup_data

    error = game.check_setup_data(payload, resolved)
    if error is not None:
        logger.info(
            "[%s] Setup data rejected: %s", game.name, error,
            extra={"game_name": game.name, "num_players": resolved},
        )
        return SetupDataRejected(
            error=error, game_name=game.name, num_players=resolved, setup_data=payload,
        )

    metadata = create_metadata(
        game=game,
        num_players=resolved,
        setup_data=setup_data,
        unlisted=unlisted,
        password=password,
    )
    initial_state = state_initializer(game=game, num_players=resolved, setup_data=payload)

    logger.debug(
        "[%s] Match created with %d seats", game.name, resolved,
        extra={"game_name": game.name, "num_players": resolved},
    )
    return MatchCreated(metadata=metadata, initial_state=initial_state)
