"""Background data producers feeding the compositor."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from termcomp.compositor import AppendLine
from termcomp.widgets.list_view import ListWidget

logger = logging.getLogger(__name__)


class LogProducer(threading.Thread):
    """
    Emits a fake log line every ``interval`` seconds.

    Lines alternate between ``INFO`` and ``WARN`` and carry the tick
    counter repeated three times (``INFO 000``, ``WARN 111``, ...). The
    line is not appended here: an AppendLine event goes to ``sink`` and
    the loop thread does the append.
    """

    def __init__(
        self,
        target: ListWidget,
        sink: Callable[[AppendLine], None],
        interval: float = 1.5,
    ) -> None:
        super().__init__(name="log-producer", daemon=True)
        self.target = target
        self.sink = sink
        self.interval = interval
        self.count = 0
        self._stop_event = threading.Event()

    @staticmethod
    def format_line(count: int) -> str:
        level = "INFO" if count % 2 == 0 else "WARN"
        return f"{level} {count}{count}{count}"

    def run(self) -> None:
        logger.debug("log producer started, interval=%.2fs", self.interval)
        while not self._stop_event.wait(self.interval):
            self.sink(AppendLine(self.target, self.format_line(self.count)))
            self.count += 1
        logger.debug("log producer stopped after %d lines", self.count)

    def stop(self) -> None:
        self._stop_event.set()
