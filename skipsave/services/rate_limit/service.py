import math
import time
from dataclasses import dataclass
from typing import Callable

from loguru import logger

from skipsave.services.base import Service
from skipsave.services.settings.service import SettingsService


@dataclass
class Window:
    count: int
    reset_at: float


class RateLimitService(Service):
    """Fixed-window request counter keyed by client address.

    State lives in process memory only; every instance enforces its own limit.
    """

    name = "rate_limit_service"

    def __init__(self, settings_service: SettingsService, clock: Callable[[], float] = time.monotonic):
        settings = settings_service.settings
        self.window_seconds = float(settings.rate_limit_window_seconds)
        self.max_requests = settings.rate_limit_max
        self.clock = clock
        self.store: dict[str, Window] = {}
        self._next_sweep = clock() + self.window_seconds

    def hit(self, key: str) -> bool:
        """Count one request for key, return False once it is over the limit."""
        now = self.clock()
        self._sweep(now)

        window = self.store.get(key)
        if window is None or window.reset_at <= now:
            self.store[key] = Window(count=1, reset_at=now + self.window_seconds)
            return True

        window.count += 1
        if window.count > self.max_requests:
            if window.count == self.max_requests + 1:
                logger.warning(f"Rate limit exceeded for {key}")
            return False
        return True

    def retry_after(self, key: str) -> int:
        window = self.store.get(key)
        if window is None:
            return 0
        return max(0, math.ceil(window.reset_at - self.clock()))

    def _sweep(self, now: float) -> None:
        if now < self._next_sweep:
            return
        expired = [key for key, window in self.store.items() if window.reset_at <= now]
        for key in expired:
            del self.store[key]
        self._next_sweep = now + self.window_seconds

    def reset(self) -> None:
        self.store.clear()

    async def teardown(self) -> None:
        self.reset()
