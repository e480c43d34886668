from __future__ import annotations

from . import config


class Ticker:
    """Fixed-step tick source driven by the caller's millisecond clock.

    The game loop feeds it ``pygame.time.get_ticks()`` every frame and runs
    one simulation step per tick returned from :meth:`due`.
    """

    def __init__(self, interval_ms: int = config.TICK_MS, max_catchup: int = config.MAX_CATCHUP_TICKS):
        if interval_ms <= 0:
            raise ValueError(f"tick interval must be positive, got {interval_ms}")
        if max_catchup <= 0:
            raise ValueError(f"max_catchup must be positive, got {max_catchup}")
        self.interval_ms = interval_ms
        self.max_catchup = max_catchup
        self.running = False
        self._last_ms: int | None = None

    def start(self, now_ms: int | None = None) -> None:
        # Re-arming drops any backlog from a previous run.
        self.running = True
        self._last_ms = now_ms

    def stop(self) -> None:
        self.running = False
        self._last_ms = None

    def due(self, now_ms: int) -> int:
        if not self.running:
            return 0
        if self._last_ms is None:
            self._last_ms = now_ms
            return 0

        ticks = (now_ms - self._last_ms) // self.interval_ms
        if ticks <= 0:
            return 0
        self._last_ms += ticks * self.interval_ms
        if ticks > self.max_catchup:
            self._last_ms = now_ms
            ticks = self.max_catchup
        return ticks
