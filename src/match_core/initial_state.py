# Area: Match Setup
"""
match_core.initial_state — Default initial-state builder
========================================================

Builds the state a match starts from: turn bookkeeping in ``ctx`` plus
the game-specific ``G`` returned by the game's ``setup`` hook. Rule
simulation after this point belongs to the game engine, which may also
supply its own initializer to ``create_match``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from ._config import FIRST_PLAYER_ID
from .game import Game
from .types import InitialStateDict, MatchContextDict


@dataclass
class MatchContext:
    """Turn and player-order bookkeeping at the start of a match."""
    num_players: int
    turn: int = 0
    current_player: str = FIRST_PLAYER_ID
    play_order: List[str] = field(default_factory=list)
    play_order_pos: int = 0
    phase: Optional[str] = None
    active_players: Optional[Dict[str, str]] = None

    def to_dict(self) -> MatchContextDict:
        return {
            "numPlayers": self.num_players,
            "turn": self.turn,
            "currentPlayer": self.current_player,
            "playOrder": list(self.play_order),
            "playOrderPos": self.play_order_pos,
            "phase": self.phase,
            "activePlayers": self.active_players,
        }


@dataclass
class InitialState:
    """Initial simulation state: game data ``G`` and its ``ctx``."""
    G: Any
    ctx: MatchContext
    state_id: int = 0

    def to_dict(self) -> InitialStateDict:
        return {"G": self.G, "ctx": self.ctx.to_dict(), "_stateID": self.state_id}


class StateInitializer(Protocol):
    """Anything that can build a match's initial state."""

    def __call__(self, game: Game, num_players: int, setup_data: Any = None) -> Any:
        ...


def initialize_game(game: Game, num_players: int, setup_data: Any = None) -> InitialState:
    """Build the initial state for ``num_players`` seats of ``game``."""
    ctx = MatchContext(
        num_players=num_players,
        play_order=[str(index) for index in range(num_players)],
    )
    G = game.setup(ctx, setup_data) if game.setup is not None else {}
    return InitialState(G=G if G is not None else {}, ctx=ctx)
