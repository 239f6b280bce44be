"""Name Auto-save Coordinator — asyncio driver around the pure NameDebouncer.

Invariants:
    - At most one timer is armed; every submit() cancels and re-arms it
    - Once a timer fires, its commit is detached from the timer and is never cancelled
      by later keystrokes
    - The duplicate check compares against the name currently stored, re-read right
      before the debouncer decides (other writers and deletes are never missed)
    - Each value surviving the debouncer triggers exactly one UpdateProfileName run
    - No retry, no queue: a failed commit is logged and forgotten by the debouncer
    - close() cancels the pending timer without committing and waits for in-flight commits

Design Decisions:
    - The timer passes its own deadline to due(), so early wake-ups of the event loop
      clock cannot drop a commit
    - A failed store read falls back to the last name this coordinator committed
"""

import asyncio
import logging
import time
from collections.abc import Callable

from birthday.core.autosave import NameDebouncer
from birthday.core.resource import Error, Resource
from birthday.services.profile_commands import UpdateProfileName
from birthday.services.profile_repository import ProfileRepository
from birthday.services.resource_mapping import terminal_state

logger = logging.getLogger(__name__)


class NameAutoSaveCoordinator:

    def __init__(
        self,
        update_name: UpdateProfileName,
        repository: ProfileRepository,
        quiet_period: float = 0.5,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.update_name = update_name
        self.repository = repository
        self.clock = clock
        self.debouncer = NameDebouncer(quiet_period=quiet_period)
        self.last_result: Resource | None = None
        self._timer: asyncio.TimerHandle | None = None
        self._commits: set[asyncio.Task] = set()

    def submit(self, raw: str) -> None:
        """Feed the live contents of the name input."""
        deadline = self.debouncer.offer(raw, self.clock())
        self._cancel_timer()
        loop = asyncio.get_running_loop()
        delay = max(deadline - self.clock(), 0)
        self._timer = loop.call_later(delay, self._fire, deadline)

    def _fire(self, deadline: float) -> None:
        self._timer = None
        task = asyncio.create_task(self.flush(max(self.clock(), deadline)))
        self._commits.add(task)
        task.add_done_callback(self._commits.discard)

    async def _sync_stored_name(self) -> None:
        outcome = await self.repository.get_once()
        if outcome.is_failure:
            logger.warning(
                f"Could not read stored name before auto-save: {outcome.error.message}",
                extra={"error_code": outcome.error.code},
            )
            return
        profile = outcome.value
        self.debouncer.sync_committed(profile.name if profile else None)

    async def flush(self, now: float | None = None) -> Resource | None:
        """Commit the pending value if its quiet period has elapsed."""
        now = self.clock() if now is None else now
        if not self.debouncer.is_due(now):
            return None
        await self._sync_stored_name()
        name = self.debouncer.due(now)
        if name is None:
            return None
        result = await terminal_state(self.update_name(name))
        if isinstance(result, Error):
            logger.warning(f"Name auto-save failed: {result.message}")
            self.debouncer.commit_failed(name)
        self.last_result = result
        return result

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None

    async def wait_idle(self) -> None:
        """Wait for in-flight commits (pending timers are not awaited)."""
        if self._commits:
            await asyncio.gather(*self._commits, return_exceptions=True)

    async def close(self) -> None:
        self._cancel_timer()
        await self.wait_idle()
