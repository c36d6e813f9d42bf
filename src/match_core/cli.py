# Area: Shared
"""
match_core.cli — Command-line interface
=======================================

Developer tool for trying match creation and seat lookup locally.

Usage:
    python -m match_core create chess --num-players 2
    python -m match_core create mygames.poker:POKER --setup-data '{"blinds": [1, 2]}'
    python -m match_core first-slot match.json
    cat match.json | python -m match_core first-slot -

A game given as ``module:attribute`` is imported and must be a ``Game``;
a bare name creates a game with no validator and no setup hook.

Log level and log file can be set via:
    1. CLI flag: --log-level
    2. Config key: log_level / log_file (--config FILE)
    3. Environment variables: MATCH_CORE_LOG_LEVEL / MATCH_CORE_LOG_FILE
"""

import argparse
import importlib
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from ._config import load_config, log_level, validate_config
from ._logging_config import log_error, setup_logging
from .errors import ConfigError
from .game import Game
from .match import SetupDataRejected, create_match
from .metadata import MISSING
from .players import get_first_available_player_id

logger = logging.getLogger("match_core.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="match_core",
        description="Create match records and look up open seats",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m match_core create chess --num-players 2
  python -m match_core create mygames.poker:POKER --setup-data '{"blinds": [1, 2]}'
  python -m match_core first-slot match.json
        """,
    )
    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--log-level", type=str, help="Override the configured log level")

    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create", help="Create a match and print its records as JSON")
    create.add_argument("game", help="Game name, or module:attribute of a Game object")
    create.add_argument("--num-players", type=int, default=None, help="Seat count (default: 2)")
    create.add_argument("--setup-data", type=str, default=None, help="Setup payload as JSON")
    create.add_argument("--unlisted", action="store_true", help="Hide the match from listings")
    create.add_argument("--password", type=str, default=None, help="Access secret for the match")

    first_slot = commands.add_parser("first-slot", help="Print the first open seat of a match")
    first_slot.add_argument("path", help="Match metadata or players JSON file, '-' for stdin")

    return parser.parse_args(argv)


def resolve_game(target: str) -> Game:
    """Return a Game for a bare name or import one from ``module:attribute``."""
    if ":" not in target:
        return Game(name=target)
    module_name, attr = target.split(":", 1)
    game = getattr(importlib.import_module(module_name), attr)
    if not isinstance(game, Game):
        raise TypeError(f"{target} is a {type(game).__name__}, not a Game")
    return game


def run_create(args: argparse.Namespace) -> int:
    game = resolve_game(args.game)
    setup_data: Any = MISSING
    if args.setup_data is not None:
        try:
            setup_data = json.loads(args.setup_data)
        except json.JSONDecodeError as e:
            print(f"Error: --setup-data is not valid JSON: {e}", file=sys.stderr)
            return 2

    result = create_match(
        game=game,
        num_players=args.num_players,
        setup_data=setup_data,
        unlisted=args.unlisted,
        password=args.password,
    )
    print(json.dumps(result.to_dict(), indent=2, default=str))
    return 1 if isinstance(result, SetupDataRejected) else 0


def run_first_slot(args: argparse.Namespace) -> int:
    try:
        if args.path == "-":
            document: Dict[str, Any] = json.load(sys.stdin)
        else:
            with open(args.path, encoding="utf-8") as f:
                document = json.load(f)
    except OSError as e:
        print(f"Error: cannot read {args.path}: {e}", file=sys.stderr)
        return 2
    except json.JSONDecodeError as e:
        print(f"Error: {args.path} is not valid JSON: {e}", file=sys.stderr)
        return 2
    if not isinstance(document, dict):
        print(f"Error: {args.path} must hold a JSON object", file=sys.stderr)
        return 2

    players = document.get("players", document)
    player_id = get_first_available_player_id(players)
    if player_id is None:
        logger.info("No open seat among %d players", len(players))
        return 1
    print(player_id)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        if args.log_level:
            config["log_level"] = args.log_level
            validate_config(config, source="--log-level")
    except ConfigError as e:
        log_error(e)
        return 2

    setup_logging(config.get("log_file"), log_level(config))

    if args.command == "create":
        return run_create(args)
    return run_first_slot(args)
