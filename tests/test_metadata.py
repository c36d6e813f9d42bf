# Area: Match Setup Tests
"""Tests for create_metadata()."""

import time

import pytest

from match_core.game import Game
from match_core.metadata import MISSING, build_players, create_metadata


def _game():
    return Game(name="chess")


class TestPlayers:
    """Seat creation."""

    @pytest.mark.parametrize("n", [0, 1, 2, 5])
    def test_one_open_seat_per_player(self, n):
        metadata = create_metadata(game=_game(), num_players=n)
        assert list(metadata.players) == [str(i) for i in range(n)]
        for key, record in metadata.players.items():
            assert record.id == int(key)
            assert record.name is None

    def test_negative_count_yields_no_seats(self):
        assert build_players(-3) == {}

    def test_seats_in_slot_order(self):
        players = build_players(12)
        assert list(players) == [str(i) for i in range(12)]


class TestFields:
    """Scalar fields of the record."""

    def test_game_name_copied(self):
        metadata = create_metadata(game=Game(name="tic-tac-toe"), num_players=2)
        assert metadata.game_name == "tic-tac-toe"

    @pytest.mark.parametrize("value", [0, "", None, False, [], MISSING])
    def test_unlisted_falsy_values_become_false(self, value):
        metadata = create_metadata(game=_game(), num_players=2, unlisted=value)
        assert metadata.unlisted is False

    @pytest.mark.parametrize("value", [1, "yes", True, [0]])
    def test_unlisted_truthy_values_become_true(self, value):
        metadata = create_metadata(game=_game(), num_players=2, unlisted=value)
        assert metadata.unlisted is True

    def test_password_stored_as_is(self):
        metadata = create_metadata(game=_game(), num_players=2, password="s3cret")
        assert metadata.password == "s3cret"

    def test_password_defaults_to_none(self):
        assert create_metadata(game=_game(), num_players=2).password is None

    def test_timestamps_equal_and_current(self):
        before = int(time.time() * 1000)
        metadata = create_metadata(game=_game(), num_players=2)
        after = int(time.time() * 1000)
        assert metadata.created_at == metadata.updated_at
        assert before <= metadata.created_at <= after

    def test_each_call_builds_new_record(self):
        first = create_metadata(game=_game(), num_players=2)
        second = create_metadata(game=_game(), num_players=2)
        assert first is not second
        assert first.players["0"] is not second.players["0"]


class TestSetupData:
    """Presence of the setup payload."""

    def test_omitted_when_not_passed(self):
        metadata = create_metadata(game=_game(), num_players=2)
        assert metadata.has_setup_data is False
        assert "setupData" not in metadata.to_dict()

    def test_kept_when_none_passed(self):
        metadata = create_metadata(game=_game(), num_players=2, setup_data=None)
        assert metadata.has_setup_data is True
        assert metadata.to_dict()["setupData"] is None

    def test_empty_payload_is_kept(self):
        metadata = create_metadata(game=_game(), num_players=2, setup_data={})
        assert metadata.has_setup_data is True
        assert metadata.to_dict()["setupData"] == {}

    def test_payload_forwarded(self):
        payload = {"variant": "960", "clock": [5, 3]}
        metadata = create_metadata(game=_game(), num_players=2, setup_data=payload)
        assert metadata.setup_data == payload
