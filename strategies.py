"""Direction selectors: a weighted evaluator and a two-snake payoff matrix."""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from evaluators import (
    calculate_food_score,
    evaluate_center_control,
    evaluate_food,
    evaluate_threats,
)
from occupancy import OccupancyGrid, flood_fill
from snake_state import DIRECTIONS, FALLBACK_DIRECTION, Agent, BoardSnapshot, Position

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS = {
    # MoveEvaluator
    'space': 5.0,
    'threat_radius': 2,
    'threat_penalty': 150.0,
    'threat_reward': 50.0,
    'center_base': 25.0,
    'center_falloff': 2.0,
    # DuelStrategy
    'duel_wall': 1000.0,
    'duel_self_collision': 1000.0,
    'duel_body_collision': 500.0,
    'duel_head_to_head': 100.0,
    'duel_food_win': 10.0,
    'duel_food_loss': 5.0,
    'duel_health_bonus': 5.0,
}


@dataclass
class Candidate:
    direction: str
    position: Position
    score: float = 0.0

    @property
    def fatal(self) -> bool:
        return self.score == -math.inf


def pick_best(candidates: List[Candidate]) -> str:
    """Highest finite score; on an exact tie the earlier candidate wins."""
    best: Optional[Candidate] = None
    for candidate in candidates:
        if candidate.fatal:
            continue
        if best is None or candidate.score > best.score:
            best = candidate
    if best is None:
        return FALLBACK_DIRECTION
    return best.direction


def is_move_safe(pos: Position, snapshot: BoardSnapshot) -> bool:
    """Inside the board and not on any snake's body, tails excluded."""
    if not snapshot.in_bounds(pos):
        return False
    for agent in snapshot.agents:
        if pos in agent.solid_segments():
            return False
    return True


class MoveEvaluator:
    """Scores each direction on space, food, threats and centrality."""

    def __init__(self, weights: Optional[Dict[str, float]] = None):
        self.weights = dict(DEFAULT_WEIGHTS if weights is None else weights)

    def score_candidates(self, you: Agent, snapshot: BoardSnapshot) -> List[Candidate]:
        grid = OccupancyGrid.build(snapshot)
        candidates = []

        for direction in DIRECTIONS:
            candidate = Candidate(direction, you.head.moved(direction))
            candidates.append(candidate)

            if not is_move_safe(candidate.position, snapshot):
                candidate.score = -math.inf
                continue

            pos = candidate.position
            score = self.weights['space'] * flood_fill(grid, pos)

            target = evaluate_food(pos, snapshot, you.health)
            if target is not None and target.direction == direction:
                score += calculate_food_score(target.raw_distance, you.health)

            score += evaluate_threats(
                pos, snapshot, you,
                radius=self.weights['threat_radius'],
                penalty=self.weights['threat_penalty'],
                reward=self.weights['threat_reward'],
            )
            score += evaluate_center_control(
                pos, snapshot,
                base=self.weights['center_base'],
                falloff=self.weights['center_falloff'],
            )
            candidate.score = score

        return candidates

    def select(self, you: Agent, snapshot: BoardSnapshot) -> str:
        candidates = self.score_candidates(you, snapshot)
        logger.debug("Move scores: %s", {c.direction: c.score for c in candidates})
        return pick_best(candidates)


class DuelStrategy:
    """Head-to-head selector for exactly two snakes.

    Builds a 4x4 payoff matrix of our move against the opponent's move and
    assumes the opponent picks uniformly at random, so each of our moves is
    worth the mean of its row. This is a heuristic, not an equilibrium solve.
    """

    def __init__(self, weights: Optional[Dict[str, float]] = None):
        self.weights = dict(DEFAULT_WEIGHTS if weights is None else weights)

    def payoff(self, a: Position, b: Position, you: Agent, opponent: Agent,
               snapshot: BoardSnapshot) -> float:
        """Payoff to us when we land on ``a`` and the opponent lands on ``b``."""
        w = self.weights
        our_body = you.solid_segments()
        their_body = opponent.solid_segments()
        score = 0.0

        # Hazards are as deadly as the wall
        if not snapshot.in_bounds(a) or a in snapshot.hazards:
            score -= w['duel_wall']
        if not snapshot.in_bounds(b) or b in snapshot.hazards:
            score += w['duel_wall']

        if a in our_body:
            score -= w['duel_self_collision']
        if a in their_body:
            score -= w['duel_body_collision']
        if b in their_body:
            score += w['duel_self_collision']
        if b in our_body:
            score += w['duel_body_collision']

        if a == b:
            if len(you.body) > len(opponent.body):
                score += w['duel_head_to_head']
            else:
                score -= w['duel_head_to_head']

        for food in snapshot.food:
            da = a.manhattan(food)
            db = b.manhattan(food)
            if da < db:
                score += w['duel_food_win'] / (da + 1)
            elif db < da:
                score -= w['duel_food_loss'] / (db + 1)

        if you.health < opponent.health:
            score += w['duel_health_bonus']

        return score

    def payoff_matrix(self, you: Agent, opponent: Agent, snapshot: BoardSnapshot) -> np.ndarray:
        matrix = np.zeros((len(DIRECTIONS), len(DIRECTIONS)))
        for i, ours in enumerate(DIRECTIONS):
            a = you.head.moved(ours)
            for j, theirs in enumerate(DIRECTIONS):
                b = opponent.head.moved(theirs)
                matrix[i, j] = self.payoff(a, b, you, opponent, snapshot)
        return matrix

    @staticmethod
    def expected_values(matrix: np.ndarray) -> np.ndarray:
        return matrix.mean(axis=1)

    @staticmethod
    def mixed_strategy(values: np.ndarray) -> np.ndarray:
        total = values.sum()
        if total > 0:
            return values / total
        return np.full(len(values), 1.0 / len(values))

    def select(self, you: Agent, opponent: Agent, snapshot: BoardSnapshot) -> str:
        if len(snapshot.agents) != 2:
            logger.warning("Duel strategy needs exactly 2 snakes, got %d; falling back to %s",
                           len(snapshot.agents), FALLBACK_DIRECTION)
            return FALLBACK_DIRECTION

        matrix = self.payoff_matrix(you, opponent, snapshot)
        values = self.expected_values(matrix)
        distribution = self.mixed_strategy(values)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Duel expected values: %s, distribution: %s",
                         values.round(2).tolist(), distribution.round(3).tolist())

        # A uniform fallback ties every move, so rank by the raw values then.
        # When the sum is positive both rankings agree.
        ranking = distribution if values.sum() > 0 else values
        return DIRECTIONS[int(np.argmax(ranking))]
