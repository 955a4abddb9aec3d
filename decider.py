import logging
from typing import Dict, Optional

from snake_state import BoardSnapshot
from strategies import DEFAULT_WEIGHTS, DuelStrategy, MoveEvaluator

logger = logging.getLogger(__name__)


class Decider:
    """Entry point: picks a direction selector by snake count and runs it.

    Holds only the scoring weights; every call works from the snapshot it
    is given, so one instance can serve concurrent requests.
    """

    def __init__(self, weights: Optional[Dict[str, float]] = None):
        self.base_weights = DEFAULT_WEIGHTS.copy()
        self.weights = self.base_weights.copy()
        if weights:
            self.weights.update(weights)

    def strategy_name(self, snapshot: BoardSnapshot) -> str:
        return 'duel' if len(snapshot.agents) == 2 else 'evaluate'

    def decide(self, snapshot: BoardSnapshot) -> str:
        you = snapshot.you
        strategy = self.strategy_name(snapshot)

        if strategy == 'duel':
            opponent = snapshot.opponents()[0]
            move = DuelStrategy(self.weights).select(you, opponent, snapshot)
        else:
            move = MoveEvaluator(self.weights).select(you, snapshot)

        logger.debug("Turn %d: %s strategy with %d snakes chose %s",
                     snapshot.turn, strategy, len(snapshot.agents), move)
        return move

    def get_move(self, game_state: Dict) -> str:
        """Decide from a raw ``/move`` request body."""
        return self.decide(BoardSnapshot.from_game_state(game_state))

    def update_weights(self, new_weights: Dict[str, float]):
        self.weights.update(new_weights)

    def reset_weights(self):
        self.weights = self.base_weights.copy()

    def get_weights(self) -> Dict[str, float]:
        return self.weights.copy()
