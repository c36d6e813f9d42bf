# Area: Shared Tests
"""Tests for the command-line interface."""

import io
import json
import logging

import pytest

from match_core.cli import main, resolve_game
from match_core.game import Game


@pytest.fixture(autouse=True)
def cli_env(monkeypatch, tmp_path):
    """Run each CLI call in a temp dir with file logging disabled afterwards."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MATCH_CORE_LOG_FILE", str(tmp_path / "cli.log"))
    monkeypatch.delenv("MATCH_CORE_LOG_LEVEL", raising=False)
    yield tmp_path
    pkg_logger = logging.getLogger("match_core")
    for handler in list(pkg_logger.handlers):
        handler.close()
    pkg_logger.handlers.clear()
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)


@pytest.fixture
def games_module(monkeypatch, tmp_path):
    """Importable module with a Game whose validator rejects everything."""
    (tmp_path / "cli_demo_games.py").write_text(
        "from match_core.game import Game\n"
        "STRICT = Game(name='strict', validate_setup_data=lambda data, n: 'bad config')\n"
        "NOT_A_GAME = 42\n",
        encoding="utf-8",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    return "cli_demo_games"


class TestCreate:
    """`create` subcommand."""

    def test_create_named_game(self, capsys):
        assert main(["create", "chess", "--num-players", "3"]) == 0
        output = json.loads(capsys.readouterr().out)
        metadata = output["metadata"]
        assert metadata["gameName"] == "chess"
        assert list(metadata["players"]) == ["0", "1", "2"]
        assert "setupData" not in metadata
        assert output["initialState"]["ctx"]["numPlayers"] == 3

    def test_default_player_count(self, capsys):
        assert main(["create", "chess"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert len(output["metadata"]["players"]) == 2

    def test_options(self, capsys):
        code = main([
            "create", "poker", "--setup-data", '{"blinds": [1, 2]}',
            "--unlisted", "--password", "pw",
        ])
        assert code == 0
        metadata = json.loads(capsys.readouterr().out)["metadata"]
        assert metadata["setupData"] == {"blinds": [1, 2]}
        assert metadata["unlisted"] is True
        assert metadata["password"] == "pw"

    def test_rejected_setup_data(self, capsys, games_module):
        assert main(["create", f"{games_module}:STRICT"]) == 1
        assert json.loads(capsys.readouterr().out) == {"setupDataError": "bad config"}

    def test_invalid_setup_json(self, capsys):
        assert main(["create", "chess", "--setup-data", "{oops"]) == 2
        assert "not valid JSON" in capsys.readouterr().err

    def test_bad_log_level(self, capsys):
        assert main(["--log-level", "LOUD", "create", "chess"]) == 2
        assert "CONFIG_ERROR" in capsys.readouterr().err


class TestResolveGame:

    def test_bare_name(self):
        assert resolve_game("chess") == Game(name="chess")

    def test_imported_game(self, games_module):
        assert resolve_game(f"{games_module}:STRICT").name == "strict"

    def test_non_game_attribute(self, games_module):
        with pytest.raises(TypeError):
            resolve_game(f"{games_module}:NOT_A_GAME")


class TestFirstSlot:
    """`first-slot` subcommand."""

    def test_metadata_file(self, capsys, cli_env):
        path = cli_env / "match.json"
        path.write_text(json.dumps({
            "gameName": "chess",
            "players": {"0": {"id": 0, "name": "A"}, "1": {"id": 1}, "2": {"id": 2, "name": "B"}},
        }), encoding="utf-8")
        assert main(["first-slot", str(path)]) == 0
        assert capsys.readouterr().out.strip() == "1"

    def test_full_match(self, capsys, cli_env):
        path = cli_env / "players.json"
        path.write_text(json.dumps({"0": {"id": 0, "name": "A"}}), encoding="utf-8")
        assert main(["first-slot", str(path)]) == 1
        assert capsys.readouterr().out == ""

    def test_missing_file(self, capsys, cli_env):
        assert main(["first-slot", str(cli_env / "absent.json")]) == 2
        assert "cannot read" in capsys.readouterr().err

    def test_invalid_json_file(self, capsys, cli_env):
        path = cli_env / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert main(["first-slot", str(path)]) == 2
        assert "not valid JSON" in capsys.readouterr().err

    def test_non_object_document(self, capsys, cli_env):
        path = cli_env / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert main(["first-slot", str(path)]) == 2
        assert "JSON object" in capsys.readouterr().err

    def test_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps({"players": {"0": {"id": 0}}})))
        assert main(["first-slot", "-"]) == 0
        assert capsys.readouterr().out.strip() == "0"
