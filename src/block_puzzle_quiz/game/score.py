from __future__ import annotations

import math
from typing import Callable, Optional

from .scheduler import Scheduler


class ScoreTracker:
    """Accumulated score with a smoothed visible value.

    `total` is updated immediately. `value` climbs towards it in `updates`
    equal sub-increments spread over `duration` time units; overlapping
    sequences add up and are never cancelled.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        updates: int = 10,
        duration: float = 200,
        on_change: Optional[Callable[[float], None]] = None,
    ) -> None:
        if updates <= 0:
            raise ValueError(f"Score updates must be positive, got {updates}")
        self.scheduler = scheduler
        self.updates = int(updates)
        self.duration = float(duration)
        self.on_change = on_change
        self.total = 0
        self.value = 0.0
        self._in_flight = 0

    @property
    def display(self) -> int:
        return math.floor(self.value + 0.5)

    @property
    def settled(self) -> bool:
        return self._in_flight == 0

    def add_score(self, delta: int) -> None:
        if delta < 0:
            raise ValueError(f"Score can only increase, got delta={delta}")
        if delta == 0:
            return
        self.total += delta
        self._in_flight += 1
        step = delta / self.updates
        interval = self.duration / self.updates
        for i in range(self.updates):
            last = i == self.updates - 1
            self.scheduler.schedule(interval * i, lambda last=last: self._apply(step, last), "score")

    def _apply(self, step: float, last: bool) -> None:
        self.value = min(self.value + step, float(self.total))
        if last:
            self._in_flight -= 1
            if self._in_flight == 0:
                # Float sub-steps may drift; pin to the exact total once settled
                self.value = float(self.total)
        if self.on_change is not None:
            self.on_change(self.value)
