import logging

from flask import Flask, request, jsonify

from decider import Decider
from settings import SNAKE_INFO
from snake_state import FALLBACK_DIRECTION, BoardSnapshot, InvalidGameState, game_id_of

logger = logging.getLogger(__name__)

# Create Flask app and snake logic
app = Flask(__name__)
decider = Decider()


@app.route('/')
def info():
    return jsonify(SNAKE_INFO)


@app.route('/start', methods=['POST'])
def start():
    game_id = game_id_of(request.get_json(silent=True)) or 'unknown'
    logger.info("New game starting: %s", game_id)
    return jsonify({"color": SNAKE_INFO["color"]})


@app.route('/move', methods=['POST'])
def move():
    game_state = request.get_json(silent=True)
    try:
        snapshot = BoardSnapshot.from_game_state(game_state)
    except InvalidGameState as e:
        # Always answer with a legal move, even for a bad payload
        logger.error("Invalid game state, sending %s: %s", FALLBACK_DIRECTION, e)
        return jsonify({"move": FALLBACK_DIRECTION, "shout": "fallback"})

    direction = decider.decide(snapshot)
    logger.info("Turn %d: making move %s", snapshot.turn, direction)
    return jsonify({"move": direction, "shout": decider.strategy_name(snapshot)})


@app.route('/end', methods=['POST'])
def end():
    game_id = game_id_of(request.get_json(silent=True)) or 'unknown'
    logger.info("Game ended: %s", game_id)
    return jsonify({})


# Health check endpoint
@app.route('/health')
def health():
    return jsonify({"status": "healthy"})
