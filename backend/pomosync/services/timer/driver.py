import logging
from typing import Callable, Optional


class TickDriver:
    """Single repeating tick backed by a Socket.IO background task.

    - ``arm()`` cancels any previous worker and starts a fresh one
    - ``disarm()`` cancels the current worker
    - Cancellation is by generation: each arm/disarm bumps the counter and
      a worker holding an older generation exits on its next wake-up
    - ``on_tick`` receives the worker's generation so the caller can
      re-check ``is_current`` under its own lock before mutating state

    Callers must serialize arm/disarm (``TimerHub`` holds its lock).
    """

    def __init__(self, socketio, on_tick: Callable[[int], None], interval: float = 1.0,
                 spawn: bool = True, logger: Optional[logging.Logger] = None):
        if interval <= 0:
            raise ValueError(f"tick interval must be positive, got {interval}")
        self._socketio = socketio
        self._on_tick = on_tick
        self._interval = float(interval)
        self._spawn = spawn
        self._logger = logger or logging.getLogger('pomosync.driver')
        self._generation = 0
        self._armed = False

    @property
    def armed(self) -> bool:
        return self._armed

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def interval(self) -> float:
        return self._interval

    def is_current(self, generation: int) -> bool:
        return self._armed and generation == self._generation

    def arm(self) -> int:
        self._generation += 1
        self._armed = True
        generation = self._generation
        self._logger.info(f"[tick-arm] generation={generation} interval={self._interval}s")
        if self._spawn:
            self._socketio.start_background_task(self._worker, generation)
        return generation

    def disarm(self) -> None:
        if not self._armed:
            return
        self._generation += 1
        self._armed = False
        self._logger.info(f"[tick-disarm] generation={self._generation}")

    def _worker(self, generation: int) -> None:
        while True:
            self._socketio.sleep(self._interval)
            if not self.is_current(generation):
                self._logger.info(
                    f"[tick-abort] generation={generation} current={self._generation}"
                )
                return
            try:
                self._on_tick(generation)
            except Exception:
                # the loop outlives a failed tick
                self._logger.exception(f"[tick-error] generation={generation}")
