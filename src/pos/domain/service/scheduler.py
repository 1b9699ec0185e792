"""Cancellable delayed callbacks.

The scan decoder needs exactly one kind of asynchrony: "run this in
100 ms unless I cancel it first".  Scheduler is that abstraction.

CooperativeScheduler never starts a thread.  The event loop that feeds
keystrokes calls ``run_due()`` before handling each event, and any
callback whose deadline has passed runs then, on the caller's thread.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable


@dataclass(eq=False)
class ScheduledCall:
    due: float
    callback: Callable[[], None]
    cancelled: bool = False


class Scheduler(ABC):

    @abstractmethod
    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """Arrange for *callback* to run *delay* seconds from now."""

    @abstractmethod
    def cancel(self, call: ScheduledCall) -> None:
        """Prevent a scheduled call from running. Idempotent."""

    @abstractmethod
    def run_due(self) -> int:
        """Run every pending call whose deadline has passed."""


class CooperativeScheduler(Scheduler):

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._pending: list[ScheduledCall] = []

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(due=self._clock() + delay, callback=callback)
        self._pending.append(call)
        return call

    def cancel(self, call: ScheduledCall) -> None:
        call.cancelled = True
        if call in self._pending:
            self._pending.remove(call)

    def run_due(self) -> int:
        now = self._clock()
        due = [c for c in self._pending if c.due <= now]
        self._pending = [c for c in self._pending if c.due > now]
        for call in sorted(due, key=lambda c: c.due):
            if not call.cancelled:
                call.callback()
        return len(due)
