from flask import current_app, request

from pomosync import socketio
from pomosync.sync import TimerHub, get_hub


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _hub() -> TimerHub:
    return get_hub(current_app)


def handle_connect(auth=None):
    _hub().on_client_connect(_get_sid())


def handle_disconnect(reason=None):
    _hub().on_client_disconnect(_get_sid())


def handle_start_timer(data=None):
    _hub().on_start_command(_get_sid())


def handle_pause_timer(data=None):
    _hub().on_pause_command(_get_sid())


def handle_reset_timer(data=None):
    _hub().on_reset_command(_get_sid())


def handle_update_settings(data=None):
    _hub().on_settings_command(data, _get_sid())


def handle_error(exc):
    """Log and carry on; the shared timer keeps running for everyone else."""
    event = request.event.get('message') if getattr(request, 'event', None) else None  # type: ignore
    current_app.logger.error(f"[socket-error] event={event} error={exc!r}", exc_info=exc)


def register_socketio_handlers(namespace: str = '/') -> None:
    """Bind timer commands and connection lifecycle on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('start-timer', handle_start_timer, namespace=namespace)
    socketio.on_event('pause-timer', handle_pause_timer, namespace=namespace)
    socketio.on_event('reset-timer', handle_reset_timer, namespace=namespace)
    socketio.on_event('update-settings', handle_update_settings, namespace=namespace)
    socketio.on_error(namespace)(handle_error)
