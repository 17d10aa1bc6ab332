import math
import re
from typing import Any, Optional

MIN_MINUTES = 1
MAX_MINUTES = 60
DEFAULT_WORK_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5

PYRAMID_BASE_MINUTES = 5
PYRAMID_STEP_MINUTES = 5
PYRAMID_CAP_MINUTES = 30

_LEADING_NUMBER = re.compile(r'^\s*([+-]?\d+(?:\.\d*)?)')
_TRUTHY = {'1', 'true', 'yes', 'on'}


def pyramid_minutes(cycle_count: int) -> int:
    """Work length for the given cycle: 5, 10, 15 ... capped at 30 minutes."""
    cycles = max(0, int(cycle_count))
    return min(PYRAMID_CAP_MINUTES, PYRAMID_BASE_MINUTES + PYRAMID_STEP_MINUTES * cycles)


def pyramid_seconds(cycle_count: int) -> int:
    return pyramid_minutes(cycle_count) * 60


def parse_minutes(value: Any, default: int) -> int:
    """Lenient minute parsing: junk, zero, NaN or infinity fall back to
    ``default``; everything else is truncated and clamped to [1, 60].
    """
    number: Optional[float]
    if isinstance(value, bool) or value is None:
        number = None
    elif isinstance(value, int):
        # ints beyond float range are clamped without a float round-trip
        return default if value == 0 else max(MIN_MINUTES, min(MAX_MINUTES, value))
    elif isinstance(value, float):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        number = float(match.group(1)) if match else None
    else:
        number = None

    if number is None or math.isnan(number) or math.isinf(number):
        return default
    minutes = int(number)
    if minutes == 0:
        return default
    return max(MIN_MINUTES, min(MAX_MINUTES, minutes))


def parse_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def format_time(seconds: int) -> str:
    """Render seconds as zero-padded MM:SS."""
    seconds = max(0, int(seconds))
    minutes, remaining = divmod(seconds, 60)
    return f"{minutes:02d}:{remaining:02d}"
