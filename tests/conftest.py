"""
Shared snapshot builders for the engine tests.
"""

import pytest

from snake_state import Agent, BoardSnapshot, Position


def make_agent(agent_id, body, health=100, length=None):
    """Build an Agent from (x, y) tuples, head first."""
    positions = tuple(Position(x, y) for x, y in body)
    return Agent(id=agent_id, body=positions, health=health,
                 length=length if length is not None else len(positions))


def make_snapshot(you, others=(), width=11, height=11, food=(), hazards=(), turn=0):
    return BoardSnapshot(
        width=width,
        height=height,
        you=you,
        agents=(you,) + tuple(others),
        food=frozenset(Position(x, y) for x, y in food),
        hazards=frozenset(Position(x, y) for x, y in hazards),
        turn=turn,
    )


def make_game_state(you, others=(), width=11, height=11, food=(), hazards=None, turn=3):
    """Raw Battlesnake /move payload with the given snakes."""

    def snake_json(snake_id, body, health=100):
        cells = [{"x": x, "y": y} for x, y in body]
        return {
            "id": snake_id,
            "name": snake_id,
            "health": health,
            "body": cells,
            "head": cells[0],
            "length": len(cells),
        }

    you_json = snake_json(*you)
    board = {
        "width": width,
        "height": height,
        "food": [{"x": x, "y": y} for x, y in food],
        "snakes": [you_json] + [snake_json(*other) for other in others],
    }
    if hazards is not None:
        board["hazards"] = [{"x": x, "y": y} for x, y in hazards]
    return {
        "game": {"id": "game-1", "timeout": 500},
        "turn": turn,
        "board": board,
        "you": you_json,
    }


@pytest.fixture
def lone_snake():
    """Head at (5, 5) on an 11x11 board, body trailing left."""
    return make_agent("me", [(5, 5), (4, 5), (3, 5)])
