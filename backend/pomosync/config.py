import os


def _origins(raw):
    origins = [o.strip() for o in raw.split(',') if o.strip()]
    if not origins or origins == ['*']:
        return '*'
    return origins


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    CORS_ALLOWED_ORIGINS = _origins(os.environ.get('CORS_ALLOWED_ORIGINS', '*'))
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Tick cadence of the shared countdown (seconds)
    TICK_INTERVAL_SEC = float(os.environ.get('TICK_INTERVAL_SEC', '1'))
    # Durations the timer starts with after process start
    DEFAULT_WORK_MINUTES = int(os.environ.get('DEFAULT_WORK_MINUTES', '25'))
    DEFAULT_BREAK_MINUTES = int(os.environ.get('DEFAULT_BREAK_MINUTES', '5'))
    # Spawn real tick workers even when TESTING is set
    ENABLE_TICK_DRIVER_IN_TESTS = False
