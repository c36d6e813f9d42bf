# Area: Match Setup
"""
match_core.game — Game descriptor
=================================

A ``Game`` identifies a game by name and carries the optional hooks the
match setup core consults. The rules engine itself lives elsewhere; this
core only needs the name, the setup-data validator and the initial-state
``setup`` hook.

    chess = Game(
        name="chess",
        validate_setup_data=lambda data, n: None if n == 2 else "chess needs 2 players",
        setup=lambda ctx, data: {"board": initial_board(data)},
    )
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from .initial_state import MatchContext

SetupDataT = TypeVar("SetupDataT")

# (setup_data, num_players) -> error message, or None when the payload is valid
SetupDataValidator = Callable[[Optional[SetupDataT], int], Optional[str]]

# (ctx, setup_data) -> game-specific state ("G")
GameSetup = Callable[["MatchContext", Optional[SetupDataT]], Any]


@dataclass(frozen=True)
class Game(Generic[SetupDataT]):
    """
    Read-only description of a game.

    Attributes:
        name: Game name, copied into every match's metadata
        validate_setup_data: Optional validator; absent means every
            payload is accepted
        setup: Optional builder for the game-specific part of the
            initial state
    """

    name: str
    validate_setup_data: Optional[SetupDataValidator] = None
    setup: Optional[GameSetup] = None

    def check_setup_data(self, setup_data: Optional[SetupDataT], num_players: int) -> Optional[str]:
        """Run the validator if there is one. Returns the error message or None."""
        if self.validate_setup_data is None:
            return None
        return self.validate_setup_data(setup_data, num_players)
