"""Independent scoring terms for a candidate head position."""

from typing import NamedTuple, Optional

from snake_state import Agent, BoardSnapshot, Position

LOW_HEALTH = 25
HUNGRY_HEALTH = 50


class FoodTarget(NamedTuple):
    food: Position
    raw_distance: int
    distance: float     # raw distance scaled by urgency
    direction: str


def evaluate_food(pos: Position, snapshot: BoardSnapshot, health: int) -> Optional[FoodTarget]:
    """Nearest food from ``pos`` and the direction that closes the gap fastest.

    Nearest is by Manhattan distance, ties broken by lowest (x, y) so the
    result does not depend on the order food arrived in the payload.
    Returns None when there is no food on the board.
    """
    if not snapshot.food:
        return None

    nearest = min(snapshot.food, key=lambda f: (pos.manhattan(f), f.x, f.y))
    raw_distance = pos.manhattan(nearest)
    urgency = 1.5 if health < LOW_HEALTH else 1.0

    dx = nearest.x - pos.x
    dy = nearest.y - pos.y
    if abs(dx) > abs(dy):
        direction = 'right' if dx > 0 else 'left'
    else:
        direction = 'down' if dy < 0 else 'up'

    return FoodTarget(nearest, raw_distance, raw_distance * urgency, direction)


def calculate_food_score(raw_distance: int, health: int) -> float:
    if health < LOW_HEALTH:
        multiplier = 3.0
    elif health < HUNGRY_HEALTH:
        multiplier = 1.5
    else:
        multiplier = 1.0
    return (100.0 - raw_distance) * multiplier


def evaluate_threats(pos: Position, snapshot: BoardSnapshot, you: Agent,
                     radius: int = 2, penalty: float = 150.0, reward: float = 50.0) -> float:
    """Penalise moving near heads we would lose to, reward ones we would beat."""
    score = 0.0
    for agent in snapshot.agents:
        if agent.id == you.id:
            continue
        if pos.manhattan(agent.head) > radius:
            continue
        if len(you.body) <= len(agent.body):
            score -= penalty
        else:
            score += reward
    return score


def evaluate_center_control(pos: Position, snapshot: BoardSnapshot,
                            base: float = 25.0, falloff: float = 2.0) -> float:
    center_x, center_y = snapshot.center
    return base - falloff * pos.euclidean(center_x, center_y)
