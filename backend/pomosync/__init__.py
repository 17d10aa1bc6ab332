from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from pomosync.config import Config

socketio = SocketIO(async_mode=None)


def _validate_config(flask_app):
    for key in ('DEFAULT_WORK_MINUTES', 'DEFAULT_BREAK_MINUTES'):
        minutes = int(flask_app.config.get(key))
        if not 1 <= minutes <= 60:
            raise ValueError(f"{key} must be in [1, 60], got {minutes}")
    if float(flask_app.config.get('TICK_INTERVAL_SEC')) <= 0:
        raise ValueError("TICK_INTERVAL_SEC must be positive")


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    _validate_config(flask_app)

    allowed_origins = flask_app.config.get('CORS_ALLOWED_ORIGINS', '*')
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One shared timer per app; handlers look it up through app.extensions
    from pomosync.sync import EXTENSION_KEY, TimerHub
    flask_app.extensions[EXTENSION_KEY] = TimerHub.from_app(flask_app, socketio)

    from pomosync.routes import main
    flask_app.register_blueprint(main)

    from pomosync.socketio_events import register_socketio_handlers
    register_socketio_handlers(flask_app.config.get('SOCKETIO_NAMESPACE', '/'))

    @click.command('pyramid-schedule')
    @click.option('--cycles', default=7, show_default=True, type=click.IntRange(min=1),
                  help='Number of cycles to list.')
    def pyramid_schedule_command(cycles):
        """Print the pyramid-mode work duration for each cycle."""
        from pomosync.services.timer.schedule import pyramid_minutes
        for cycle in range(cycles):
            click.echo(f"cycle {cycle}: {pyramid_minutes(cycle)} min")

    flask_app.cli.add_command(pyramid_schedule_command)

    return flask_app
