from flask import Blueprint, current_app, jsonify

from pomosync.sync import get_hub

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the shared Pomodoro timer!'})


@main.route('/api/timer/state')
def timer_state():
    hub = get_hub(current_app)
    return jsonify({**hub.snapshot(), 'userCount': hub.connection_count})


@main.route('/healthz')
def healthz():
    return jsonify({'status': 'ok', 'userCount': get_hub(current_app).connection_count})
