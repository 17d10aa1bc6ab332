from typing import Any, Dict

from pomosync.services.timer.schedule import format_time

MODE_WORK = 'work'
MODE_BREAK = 'break'

DEFAULT_WORK_SECONDS = 25 * 60
DEFAULT_BREAK_SECONDS = 5 * 60


class TimerState:
    """The single shared countdown. Mutated in place, never replaced."""

    def __init__(self, work_duration_seconds: int = DEFAULT_WORK_SECONDS,
                 break_duration_seconds: int = DEFAULT_BREAK_SECONDS):
        self.running = False
        self.mode = MODE_WORK
        self.work_duration_seconds = int(work_duration_seconds)
        self.break_duration_seconds = int(break_duration_seconds)
        self.time_remaining_seconds = self.work_duration_seconds
        self.cycle_count = 0
        self.pyramid_mode_enabled = False

    @property
    def current_duration_seconds(self) -> int:
        if self.mode == MODE_BREAK:
            return self.break_duration_seconds
        return self.work_duration_seconds

    @property
    def formatted_time(self) -> str:
        return format_time(self.time_remaining_seconds)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'isRunning': self.running,
            'timeRemaining': self.time_remaining_seconds,
            'mode': self.mode,
            'workDuration': self.work_duration_seconds,
            'breakDuration': self.break_duration_seconds,
            'cycleCount': self.cycle_count,
            'pyramidMode': self.pyramid_mode_enabled,
            'formattedTime': self.formatted_time,
        }

    def mode_change_dict(self) -> Dict[str, Any]:
        return {'mode': self.mode, 'cycleCount': self.cycle_count}

    def __repr__(self):
        return (
            f"<TimerState mode={self.mode} running={self.running} "
            f"remaining={self.time_remaining_seconds} cycle={self.cycle_count}>"
        )
