from flask import Blueprint, current_app, jsonify, request

from leaderboard.services.games.scores import (
    append_score,
    create_game,
    delete_game,
    game_info,
    list_scores,
)

games = Blueprint('games', __name__)


def _presented_key():
    header = current_app.config.get('API_KEY_HEADER', 'api-key')
    return request.headers.get(header)


@games.route('', methods=['POST'])
def create():
    data = request.get_json(silent=True)
    # Accept a bare JSON string or {"name": ...}
    name = data.get('name') if isinstance(data, dict) else data
    game_id, keys = create_game(name)
    return jsonify({
        'id': game_id,
        'name': name,
        'keys': keys.to_dict(),
    }), 201


@games.route('/<string:game_name>', methods=['GET'])
def info(game_name):
    return jsonify(game_info(game_name).to_dict())


@games.route('/<string:game_name>', methods=['DELETE'])
def delete(game_name):
    removed = delete_game(game_name, _presented_key())
    return jsonify({'removed': removed})


@games.route('/<string:game_name>/scores', methods=['POST'])
def add_score(game_name):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        # Malformed bodies still go through the key check before being rejected
        data = {}
    record = append_score(game_name, _presented_key(), data.get('score'), data.get('extra_info'))
    return jsonify(record.to_dict()), 201


@games.route('/<string:game_name>/scores', methods=['GET'])
def get_scores(game_name):
    return jsonify([record.to_dict() for record in list_scores(game_name, _presented_key())])
