import logging
from typing import Any, Optional

from pomosync.models import MODE_BREAK, MODE_WORK, TimerState
from .schedule import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_WORK_MINUTES,
    parse_flag,
    parse_minutes,
    pyramid_seconds,
)


class TimerEngine:
    """Work/break state machine over a single ``TimerState``.

    The engine arms and disarms the tick driver it is given but never
    waits on it; callers feed elapsed seconds back in through ``tick()``.
    Not thread-safe on its own, ``TimerHub`` serializes access.
    """

    def __init__(self, state: Optional[TimerState] = None, driver=None,
                 logger: Optional[logging.Logger] = None):
        self.state = state or TimerState()
        self.driver = driver
        self.logger = logger or logging.getLogger('pomosync.timer')

    def start(self) -> bool:
        if self.state.running:
            return False
        self.state.running = True
        self._arm()
        return True

    def pause(self) -> bool:
        if not self.state.running:
            return False
        self.state.running = False
        self._disarm()
        return True

    def reset(self) -> None:
        state = self.state
        state.running = False
        self._disarm()
        state.mode = MODE_WORK
        state.cycle_count = 0
        if state.pyramid_mode_enabled:
            state.work_duration_seconds = pyramid_seconds(0)
        state.time_remaining_seconds = state.work_duration_seconds

    def tick(self) -> bool:
        """Advance one second. Returns True when the tick switched modes."""
        state = self.state
        if not state.running:
            return False
        if state.time_remaining_seconds > 0:
            state.time_remaining_seconds -= 1
            if state.time_remaining_seconds > 0:
                return False
        self._transition()
        return True

    def apply_settings(self, work_minutes: Any = None, break_minutes: Any = None,
                       pyramid_mode: Any = None) -> None:
        state = self.state
        if pyramid_mode is not None:
            enable = parse_flag(pyramid_mode)
            state.pyramid_mode_enabled = enable
            if enable:
                state.work_duration_seconds = pyramid_seconds(state.cycle_count)

        # Missing fields fall back to the defaults, same as junk input.
        if not state.pyramid_mode_enabled:
            state.work_duration_seconds = parse_minutes(work_minutes, DEFAULT_WORK_MINUTES) * 60
        state.break_duration_seconds = parse_minutes(break_minutes, DEFAULT_BREAK_MINUTES) * 60

        # Deliberately not prorated: the running session jumps to the new length.
        state.time_remaining_seconds = state.current_duration_seconds

        if state.running:
            self._arm()

    def _transition(self) -> None:
        state = self.state
        if state.mode == MODE_WORK:
            state.mode = MODE_BREAK
            state.cycle_count += 1
            state.time_remaining_seconds = state.break_duration_seconds
        else:
            state.mode = MODE_WORK
            if state.pyramid_mode_enabled:
                state.work_duration_seconds = pyramid_seconds(state.cycle_count)
            state.time_remaining_seconds = state.work_duration_seconds
        self.logger.info(f"[timer-transition] mode={state.mode} cycle={state.cycle_count}")

    def _arm(self) -> None:
        if self.driver is not None:
            self.driver.arm()

    def _disarm(self) -> None:
        if self.driver is not None:
            self.driver.disarm()
