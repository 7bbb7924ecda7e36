"""Virtual clock for timed animation steps.

Steps are plain callbacks queued with a delay. Nothing runs on its own:
the owner advances the clock, either with real frame time from the play
loop or with virtual time in tests.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List


Callback = Callable[[], None]


@dataclass(order=True)
class ScheduledStep:
    due: float
    seq: int
    callback: Callback = field(compare=False)
    label: str = field(default="", compare=False)


class Scheduler:
    def __init__(self, start: float = 0.0) -> None:
        self.now = float(start)
        self._queue: List[ScheduledStep] = []
        self._seq = itertools.count()

    def __len__(self) -> int:
        return len(self._queue)

    @property
    def idle(self) -> bool:
        return not self._queue

    def schedule(self, delay: float, callback: Callback, label: str = "") -> ScheduledStep:
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        step = ScheduledStep(self.now + delay, next(self._seq), callback, label)
        heapq.heappush(self._queue, step)
        return step

    def pending(self) -> List[ScheduledStep]:
        """Queued steps in the order they will run"""
        return sorted(self._queue)

    def advance(self, dt: float) -> int:
        """Move the clock forward by `dt` and run every step that became due.

        Steps run in (due, insertion) order. A step scheduled by another
        step still runs in this call if it falls due within the window.
        Returns the number of steps run.
        """
        target = self.now + dt
        ran = 0
        while self._queue and self._queue[0].due <= target:
            step = heapq.heappop(self._queue)
            self.now = max(self.now, step.due)
            step.callback()
            ran += 1
        self.now = target
        return ran

    def run_all(self) -> int:
        ran = 0
        while self._queue:
            ran += self.advance(self._queue[0].due - self.now)
        return ran
