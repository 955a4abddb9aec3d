"""
Unit tests for snapshot types and game state decoding.
"""

import pytest

from conftest import make_agent, make_game_state
from snake_state import Agent, BoardSnapshot, InvalidGameState, Position, game_id_of


class TestPosition:
    """Test the board cell value type."""

    def test_moves(self):
        pos = Position(3, 3)
        assert pos.moved("up") == Position(3, 4)
        assert pos.moved("down") == Position(3, 2)
        assert pos.moved("left") == Position(2, 3)
        assert pos.moved("right") == Position(4, 3)

    def test_value_equality_and_hashing(self):
        assert Position(1, 2) == Position(1, 2)
        assert len({Position(1, 2), Position(1, 2), Position(2, 1)}) == 2

    def test_distances(self):
        assert Position(0, 0).manhattan(Position(3, -4)) == 7
        assert Position(0, 0).euclidean(3.0, 4.0) == pytest.approx(5.0)


class TestAgent:
    """Test the snake type."""

    def test_head_and_tail(self):
        agent = make_agent("me", [(1, 1), (1, 2), (1, 3)])
        assert agent.head == Position(1, 1)
        assert agent.tail == Position(1, 3)
        assert agent.solid_segments() == (Position(1, 1), Position(1, 2))

    def test_length_defaults_to_body(self):
        agent = Agent(id="me", body=(Position(0, 0), Position(0, 1)))
        assert agent.length == 2

    def test_empty_body_rejected(self):
        with pytest.raises(InvalidGameState, match="empty body"):
            Agent(id="me", body=())


class TestFromGameState:
    """Test decoding of the /move request body."""

    def test_parses_board(self):
        state = make_game_state(
            ("me", [(5, 5), (5, 4), (5, 3)], 80),
            [("them", [(1, 1), (1, 2)], 60)],
            food=[(2, 2)],
            hazards=[(0, 0)],
        )
        snapshot = BoardSnapshot.from_game_state(state)
        assert (snapshot.width, snapshot.height) == (11, 11)
        assert snapshot.you.id == "me"
        assert snapshot.you.health == 80
        assert [a.id for a in snapshot.agents] == ["me", "them"]
        assert snapshot.food == frozenset({Position(2, 2)})
        assert snapshot.hazards == frozenset({Position(0, 0)})
        assert snapshot.turn == 3
        assert snapshot.game_id == "game-1"
        assert [a.id for a in snapshot.opponents()] == ["them"]

    def test_missing_hazards_means_none(self):
        state = make_game_state(("me", [(5, 5)]))
        assert "hazards" not in state["board"]
        assert BoardSnapshot.from_game_state(state).hazards == frozenset()

    def test_self_added_when_absent_from_snakes(self):
        state = make_game_state(("me", [(5, 5)]))
        state["board"]["snakes"] = []
        snapshot = BoardSnapshot.from_game_state(state)
        assert [a.id for a in snapshot.agents] == ["me"]

    def test_off_board_cells_dropped(self):
        state = make_game_state(("me", [(5, 5)]), width=5, height=5, food=[(1, 1), (7, 7)],
                                hazards=[(-1, 0)])
        snapshot = BoardSnapshot.from_game_state(state)
        assert snapshot.food == frozenset({Position(1, 1)})
        assert snapshot.hazards == frozenset()

    def test_length_field_used(self):
        state = make_game_state(("me", [(5, 5), (5, 4)]))
        state["you"]["length"] = 4
        assert BoardSnapshot.from_game_state(state).you.length == 4

    @pytest.mark.parametrize("mutate", [
        lambda s: s.pop("board"),
        lambda s: s.pop("you"),
        lambda s: s["board"].update(width=0),
        lambda s: s["board"].update(height=-3),
        lambda s: s["you"].update(body=[]),
        lambda s: s["you"]["body"][0].update(x="left"),
        lambda s: s.update(game=None),
        lambda s: s.update(game="abc"),
        lambda s: s.update(game=["game-1"]),
        lambda s: s["board"].update(snakes=["me"]),
    ])
    def test_malformed_state_raises(self, mutate):
        state = make_game_state(("me", [(5, 5), (5, 4)]))
        mutate(state)
        with pytest.raises(InvalidGameState):
            BoardSnapshot.from_game_state(state)

    def test_none_payload_raises(self):
        with pytest.raises(InvalidGameState):
            BoardSnapshot.from_game_state(None)


class TestGameIdOf:
    """Test the lenient game id lookup used for log lines."""

    def test_reads_id(self):
        assert game_id_of(make_game_state(("me", [(5, 5)]))) == "game-1"

    @pytest.mark.parametrize("payload", [
        None,
        [],
        "game",
        {},
        {"game": None},
        {"game": "abc"},
        {"game": ["game-1"]},
    ])
    def test_unusable_payload_gives_empty_id(self, payload):
        assert game_id_of(payload) == ""
