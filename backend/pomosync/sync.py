"""Synchronization layer between the shared timer and connected clients.

One ``TimerHub`` exists per Flask app (stored in ``app.extensions``). Every
command, tick and connection event goes through its lock, and each state
change is broadcast to all clients before the lock is released.
"""
import logging
import threading
from typing import Any, Dict, Optional, Set

from pomosync.models import TimerState
from pomosync.services.timer.driver import TickDriver
from pomosync.services.timer.engine import TimerEngine

EVENT_TIMER_UPDATE = 'timer-update'
EVENT_MODE_CHANGED = 'mode-changed'
EVENT_USER_COUNT = 'user-count-update'

EXTENSION_KEY = 'pomosync'


class TimerHub:
    def __init__(self, socketio, engine: TimerEngine, namespace: str = '/',
                 logger: Optional[logging.Logger] = None):
        self.socketio = socketio
        self.engine = engine
        self.namespace = namespace
        self.logger = logger or logging.getLogger('pomosync.sync')
        self._lock = threading.RLock()
        self._clients: Set[str] = set()

    @classmethod
    def from_app(cls, app, socketio) -> 'TimerHub':
        cfg = app.config
        state = TimerState(
            work_duration_seconds=int(cfg.get('DEFAULT_WORK_MINUTES', 25)) * 60,
            break_duration_seconds=int(cfg.get('DEFAULT_BREAK_MINUTES', 5)) * 60,
        )
        engine = TimerEngine(state=state, logger=app.logger)
        hub = cls(socketio, engine, namespace=cfg.get('SOCKETIO_NAMESPACE', '/'), logger=app.logger)
        spawn = not cfg.get('TESTING') or bool(cfg.get('ENABLE_TICK_DRIVER_IN_TESTS'))

        def _on_tick(generation: int) -> None:
            with app.app_context():
                hub.on_tick_elapsed(generation)

        engine.driver = TickDriver(
            socketio,
            _on_tick,
            interval=float(cfg.get('TICK_INTERVAL_SEC', 1.0)),
            spawn=spawn,
            logger=app.logger,
        )
        return hub

    @property
    def state(self) -> TimerState:
        return self.engine.state

    @property
    def connection_count(self) -> int:
        return len(self._clients)

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return self.state.to_dict()

    # ---- connection lifecycle ----

    def on_client_connect(self, sid: str) -> None:
        with self._lock:
            self._clients.add(sid)
            count = len(self._clients)
            self.logger.info(f"[client-connect] sid={sid} count={count}")
            self._emit(EVENT_USER_COUNT, count)
            self._emit(EVENT_TIMER_UPDATE, self.state.to_dict(), to=sid)

    def on_client_disconnect(self, sid: str) -> None:
        with self._lock:
            if sid not in self._clients:
                return
            self._clients.discard(sid)
            count = len(self._clients)
            self.logger.info(f"[client-disconnect] sid={sid} count={count}")
            self._emit(EVENT_USER_COUNT, count)

    # ---- commands ----

    def on_start_command(self, sid: Optional[str] = None) -> None:
        with self._lock:
            if self.engine.start():
                self.logger.info(f"[timer-start] sid={sid}")
            self.broadcast_state()

    def on_pause_command(self, sid: Optional[str] = None) -> None:
        with self._lock:
            if self.engine.pause():
                self.logger.info(f"[timer-pause] sid={sid}")
            self.broadcast_state()

    def on_reset_command(self, sid: Optional[str] = None) -> None:
        with self._lock:
            self.engine.reset()
            self.logger.info(f"[timer-reset] sid={sid}")
            self.broadcast_state()

    def on_settings_command(self, payload: Any, sid: Optional[str] = None) -> None:
        data = payload if isinstance(payload, dict) else {}
        with self._lock:
            self.engine.apply_settings(
                work_minutes=data.get('workDuration'),
                break_minutes=data.get('breakDuration'),
                pyramid_mode=data.get('pyramidMode'),
            )
            state = self.state
            self.logger.info(
                f"[timer-settings] sid={sid} work={state.work_duration_seconds}s "
                f"break={state.break_duration_seconds}s pyramid={state.pyramid_mode_enabled}"
            )
            self.broadcast_state()

    def on_tick_elapsed(self, generation: Optional[int] = None) -> bool:
        """Apply one tick; ``generation`` comes from the driver worker and
        stale workers are dropped here, under the lock.
        """
        with self._lock:
            driver = self.engine.driver
            if generation is not None and driver is not None and not driver.is_current(generation):
                return False
            transitioned = self.engine.tick()
            self.broadcast_state()
            if transitioned:
                self._emit(EVENT_MODE_CHANGED, self.state.mode_change_dict())
            return transitioned

    # ---- broadcast ----

    def broadcast_state(self) -> None:
        self._emit(EVENT_TIMER_UPDATE, self.state.to_dict())

    def _emit(self, event: str, data: Any, to: Optional[str] = None) -> None:
        self.socketio.emit(event, data, to=to, namespace=self.namespace)


def get_hub(app) -> TimerHub:
    return app.extensions[EXTENSION_KEY]
