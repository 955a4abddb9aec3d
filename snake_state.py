"""Board snapshot types for one Battlesnake turn.

Everything here is rebuilt from the ``/move`` payload on every request;
nothing survives between turns.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Tuple

# Scan order for every decision; first listed wins a tie
DIRECTIONS = ('up', 'down', 'left', 'right')
FALLBACK_DIRECTION = 'up'

DIRECTION_VECTORS = {
    'up': (0, 1),
    'down': (0, -1),
    'left': (-1, 0),
    'right': (1, 0),
}


class InvalidGameState(ValueError):
    """Raised when a game state payload cannot be turned into a snapshot."""


@dataclass(frozen=True)
class Position:
    """Board cell, (0, 0) is bottom-left and y grows upward."""
    x: int
    y: int

    def moved(self, direction: str) -> 'Position':
        dx, dy = DIRECTION_VECTORS[direction]
        return Position(self.x + dx, self.y + dy)

    def manhattan(self, other: 'Position') -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def euclidean(self, x: float, y: float) -> float:
        return math.hypot(self.x - x, self.y - y)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Agent:
    """One snake on the board, body ordered head first."""
    id: str
    body: Tuple[Position, ...]
    health: int = 100
    length: int = 0

    def __post_init__(self):
        if not self.body:
            raise InvalidGameState(f"snake {self.id!r} has an empty body")
        if self.length < len(self.body):
            object.__setattr__(self, 'length', len(self.body))

    @property
    def head(self) -> Position:
        return self.body[0]

    @property
    def tail(self) -> Position:
        return self.body[-1]

    def solid_segments(self) -> Tuple[Position, ...]:
        """Segments that block a move; the last one vacates next tick."""
        return self.body[:-1]


@dataclass(frozen=True)
class BoardSnapshot:
    width: int
    height: int
    you: Agent
    agents: Tuple[Agent, ...]
    food: FrozenSet[Position] = field(default_factory=frozenset)
    hazards: FrozenSet[Position] = field(default_factory=frozenset)
    turn: int = 0
    game_id: str = ''

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise InvalidGameState(
                f"board dimensions must be positive, got {self.width}x{self.height}")
        if not any(agent.id == self.you.id for agent in self.agents):
            object.__setattr__(self, 'agents', self.agents + (self.you,))

    @property
    def center(self) -> Tuple[float, float]:
        return (self.width / 2, self.height / 2)

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def opponents(self) -> List[Agent]:
        return [agent for agent in self.agents if agent.id != self.you.id]

    @classmethod
    def from_game_state(cls, game_state: Dict) -> 'BoardSnapshot':
        """Decode a Battlesnake ``/move`` request body."""
        try:
            board = game_state['board']
            width = int(board['width'])
            height = int(board['height'])
            you = _parse_agent(game_state['you'])
            agents = tuple(_parse_agent(snake) for snake in board.get('snakes', []))
            food = _parse_cells(board.get('food', []))
            hazards = _parse_cells(board.get('hazards', []))
            turn = int(game_state.get('turn', 0))
            game = game_state.get('game', {})
            if not isinstance(game, dict):
                raise InvalidGameState(f"'game' must be an object, got {type(game).__name__}")
            game_id = str(game.get('id', ''))
        except InvalidGameState:
            raise
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise InvalidGameState(f"malformed game state: {e!r}") from e

        # Off-board food and hazards are dropped rather than rejected
        def on_board(pos: Position) -> bool:
            return 0 <= pos.x < width and 0 <= pos.y < height

        return cls(
            width=width,
            height=height,
            you=you,
            agents=agents,
            food=frozenset(p for p in food if on_board(p)),
            hazards=frozenset(p for p in hazards if on_board(p)),
            turn=turn,
            game_id=game_id,
        )


def _parse_position(raw: Dict) -> Position:
    return Position(int(raw['x']), int(raw['y']))


def _parse_cells(raw_cells: List[Dict]) -> FrozenSet[Position]:
    return frozenset(_parse_position(cell) for cell in raw_cells)


def _parse_agent(raw: Dict) -> Agent:
    body = tuple(_parse_position(segment) for segment in raw['body'])
    return Agent(
        id=str(raw['id']),
        body=body,
        health=int(raw.get('health', 100)),
        length=int(raw.get('length', len(body))),
    )


def game_id_of(payload: Any) -> str:
    """Game id for log lines; '' when the body has no usable ``game`` object."""
    if not isinstance(payload, dict):
        return ''
    game = payload.get('game')
    if not isinstance(game, dict):
        return ''
    return str(game.get('id', ''))
