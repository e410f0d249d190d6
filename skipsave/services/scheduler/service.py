import asyncio
from typing import Awaitable, Callable, Optional

from loguru import logger

from skipsave.services.base import Service
from skipsave.services.settings.service import SettingsService

Job = Callable[[], Awaitable[None]]


class TransferSchedulerService(Service):
    """Runs delayed background jobs as asyncio tasks.

    Jobs are fire-and-forget: failures are logged, never surfaced to a
    caller, and pending jobs are cancelled when the process shuts down.
    """

    name = "scheduler_service"

    def __init__(self, settings_service: SettingsService):
        self.default_delay = float(settings_service.settings.sandbox_completion_delay)
        self.tasks: set[asyncio.Task] = set()

    def schedule(self, job: Job, delay: Optional[float] = None, name: str = "job") -> asyncio.Task:
        delay = self.default_delay if delay is None else delay
        task = asyncio.create_task(self._run(job, delay, name), name=name)
        self.tasks.add(task)
        task.add_done_callback(self.tasks.discard)
        logger.debug(f"Scheduled {name} in {delay}s")
        return task

    async def _run(self, job: Job, delay: float, name: str) -> None:
        try:
            if delay > 0:
                await asyncio.sleep(delay)
            await job()
        except asyncio.CancelledError:
            logger.warning(f"{name} cancelled before it ran")
            raise
        except Exception as exc:
            logger.exception(f"{name} failed: {exc}")

    @property
    def pending(self) -> int:
        return len(self.tasks)

    async def drain(self) -> None:
        """Wait until every scheduled job has finished."""
        while self.tasks:
            await asyncio.gather(*list(self.tasks), return_exceptions=True)

    async def teardown(self) -> None:
        for task in list(self.tasks):
            task.cancel()
        if self.tasks:
            await asyncio.gather(*list(self.tasks), return_exceptions=True)
        self.tasks.clear()
