"""Domain service: barcode scanner decoding.

A USB barcode scanner behaves like a very fast keyboard: it "types" the
code and presses Enter.  The decoder collects single-character keys
into a buffer and treats Enter as the end of a scan.  Human typing is
filtered out by an idle window: if no key arrives within
``SCAN_IDLE_WINDOW`` seconds the buffer is discarded.

Keys typed while a text field has focus belong to that field and are
ignored here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from pos.domain.service.scheduler import ScheduledCall, Scheduler

logger = logging.getLogger(__name__)

SCAN_IDLE_WINDOW = 0.1  # seconds
ENTER_KEY = "Enter"


@dataclass(frozen=True)
class KeyEvent:
    """One key press.  ``key`` is a single character or a key name."""

    key: str
    in_text_field: bool = False


class ScanDecoder:

    def __init__(
        self,
        scheduler: Scheduler,
        on_scan: Callable[[str], None],
        idle_window: float = SCAN_IDLE_WINDOW,
    ) -> None:
        self._scheduler = scheduler
        self._on_scan = on_scan
        self._idle_window = idle_window
        self._buffer = ""
        self._reset_call: ScheduledCall | None = None

    @property
    def buffer(self) -> str:
        return self._buffer

    def handle(self, event: KeyEvent) -> None:
        if event.in_text_field:
            return

        if event.key == ENTER_KEY:
            code = self._buffer
            self._reset()
            if code:
                logger.debug("Scanned code %r", code)
                self._on_scan(code)
            return

        # Modifier and navigation keys arrive as names, not characters.
        if len(event.key) != 1:
            return

        self._buffer += event.key
        self._restart_idle_timer()

    # --- Internal helpers -----------------------------------------------------

    def _restart_idle_timer(self) -> None:
        if self._reset_call is not None:
            self._scheduler.cancel(self._reset_call)
        self._reset_call = self._scheduler.schedule(self._idle_window, self._expire)

    def _expire(self) -> None:
        if self._buffer:
            logger.debug("Discarding idle scan buffer %r", self._buffer)
        self._reset_call = None
        self._buffer = ""

    def _reset(self) -> None:
        if self._reset_call is not None:
            self._scheduler.cancel(self._reset_call)
            self._reset_call = None
        self._buffer = ""
