"""Wall-clock readings and a frame clock measuring time between ticks."""

from __future__ import annotations

import time
from typing import Callable


def time_nanos() -> float:
    """Nanoseconds elapsed within the current second."""
    return float(time.time_ns() % 1_000_000_000)


def time_millis() -> float:
    """Current time in milliseconds."""
    return time.time_ns() / 1_000_000.0


def time_seconds() -> float:
    """Current time in seconds."""
    return time.time_ns() / 1_000_000_000.0


class Clock:
    """Counts ticks and measures the time between them."""

    def __init__(self, time_source: Callable[[], float] | None = None) -> None:
        self._now = time_source if time_source is not None else time_millis
        self._delta_t = 0.0
        self._last_tick = 0.0
        self._tick_count = 0
        self.target_frame_time = 0.0

    def start(self) -> None:
        """Reset the tick count and mark the current time as the last tick."""
        self._tick_count = 0
        self._last_tick = self._now()

    def tick(self) -> None:
        """Record a tick and the seconds elapsed since the previous one."""
        self._tick_count += 1
        previous = self._last_tick
        self._last_tick = self._now()
        self._delta_t = (self._last_tick - previous) / 1000.0

    def delta_t(self) -> float:
        """Seconds between the last two ticks."""
        return self._delta_t

    def tick_count(self) -> int:
        """Ticks since start."""
        return self._tick_count

    def seconds_since_last_tick(self) -> float:
        return (self._now() - self._last_tick) / 1000.0

    def milliseconds_since_last_tick(self) -> float:
        return self._now() - self._last_tick

    def set_target_fps(self, fps: int) -> None:
        """Set the desired time per frame, in seconds, from a frame rate."""
        if fps <= 0:
            raise ValueError("fps must be positive")
        self.target_frame_time = 1.0 / fps

    def fps(self) -> int:
        """Frames per second implied by the last tick interval."""
        return int(1.0 / self._delta_t)