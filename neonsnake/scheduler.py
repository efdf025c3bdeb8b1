"""
scheduler.py — Tick timing.

Converts frame time into simulation ticks at the session's current
interval. The wait is armed when a tick is scheduled, so a speed change
made by a tick shortens the following wait, not the one in flight.
"""

from typing import Optional

from .session import GameSession


class TickScheduler:
    def __init__(self, session: GameSession):
        self.session = session
        self._elapsed: float = 0.0
        self._wait: Optional[int] = None

    def update(self, dt_ms: float) -> int:
        """Account for `dt_ms` of elapsed time. Returns the number of ticks run."""
        if not self.session.is_running:
            self.stop()
            return 0

        if self._wait is None:
            self._wait = self.session.interval
        self._elapsed += dt_ms

        fired = 0
        while self._wait is not None and self._elapsed >= self._wait:
            self._elapsed -= self._wait
            self.session.step()
            fired += 1
            if self.session.is_running:
                self._wait = self.session.interval
            else:
                self.stop()
        return fired

    def stop(self) -> None:
        """Drop any partial wait; the next update arms a fresh one."""
        self._elapsed = 0.0
        self._wait = None
