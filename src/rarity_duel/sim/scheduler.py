"""Virtual-clock scheduler for delayed, cosmetic callbacks.

The engine never sleeps.  Anything that has to happen "a little later" --
hiding a revealed hand, showing a victory notice, returning to the title
screen -- is queued here, and the host advances time (a UI frame loop, a
test, or the headless simulator draining everything at once).
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(order=True)
class ScheduledCall:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    label: str = field(default="", compare=False)


class Scheduler:
    """Runs callbacks once virtual time reaches their due time.

    Callbacks that share a due time run in the order they were scheduled.
    There is no cancellation; a callback that no longer applies is expected
    to notice and do nothing.
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._queue: list[ScheduledCall] = []
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._queue)

    def call_later(self, delay: float, callback: Callable[[], None], label: str = "") -> ScheduledCall:
        """Queue *callback* to run *delay* time units from now."""
        call = ScheduledCall(self._now + max(0.0, delay), next(self._seq), callback, label)
        heapq.heappush(self._queue, call)
        return call

    def advance(self, dt: float) -> int:
        """Move time forward by *dt*, running every callback that falls due.

        Returns the number of callbacks run.  Callbacks scheduled by other
        callbacks run in the same call if they fall within the window.
        """
        target = self._now + max(0.0, dt)
        ran = 0
        while self._queue and self._queue[0].due <= target:
            call = heapq.heappop(self._queue)
            self._now = call.due
            logger.debug("Running scheduled call %r at t=%.2f", call.label, call.due)
            call.callback()
            ran += 1
        self._now = target
        return ran

    def run_all(self) -> int:
        """Run every queued callback, however far in the future."""
        ran = 0
        while self._queue:
            ran += self.advance(self._queue[0].due - self._now)
        return ran
