"""
Flask web application exposing bracket generation as a JSON API.
"""
import os
import logging
from functools import wraps
from flask import Flask, request, jsonify
from knockout.display import get_bracket_display
from knockout.errors import BracketError
from knockout.generator import get_num_rounds
from knockout.settings import DEFAULT_SETTINGS_FILE, load_settings

app = Flask(__name__)

SETTINGS_FILE = DEFAULT_SETTINGS_FILE
MAX_PLAYERS = int(os.environ.get('BRACKET_MAX_PLAYERS', 1024))


def _parse_players(value):
    """Parse the `players` query argument; raises ValueError on bad input."""
    if value is None:
        raise ValueError('Missing "players" parameter')
    try:
        players = int(value)
    except (TypeError, ValueError):
        raise ValueError(f'Invalid player count: {value!r}') from None
    if players < 0:
        raise ValueError('Player count must not be negative')
    if players > MAX_PLAYERS:
        raise ValueError(f'Player count must not exceed {MAX_PLAYERS}')
    return players


def _parse_bool(value, default):
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def json_errors(f):
    """Turn bad input and bracket errors into a 400 JSON response."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (BracketError, ValueError) as e:
            app.logger.warning(f'Rejected {request.path} request: {e}')
            return jsonify({'error': str(e)}), 400
    return decorated_function


@app.route('/api/bracket', methods=['GET'])
@json_errors
def api_bracket():
    """Generate a bracket for the given number of players."""
    settings = load_settings(SETTINGS_FILE)
    players = _parse_players(request.args.get('players'))
    style = request.args.get('style', settings['bracket_style'])
    third_place = _parse_bool(request.args.get('third_place'), settings['third_place_match'])

    bracket_data = get_bracket_display(players, style, third_place=third_place)
    app.logger.info(f'Generated {bracket_data["style"]} bracket for {players} players '
                    f'({len(bracket_data["nodes"])} matches)')
    return jsonify(bracket_data)


@app.route('/api/bracket/rounds', methods=['GET'])
@json_errors
def api_bracket_rounds():
    """Number of rounds for the given number of players."""
    settings = load_settings(SETTINGS_FILE)
    players = _parse_players(request.args.get('players'))
    style = request.args.get('style', settings['bracket_style'])
    return jsonify({'players': players, 'style': style, 'rounds': get_num_rounds(players, style)})


if __name__ == '__main__':
    logging.basicConfig(level=load_settings(SETTINGS_FILE)['log_level'])
    app.run(debug=True, port=5000)
