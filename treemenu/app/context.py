from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from treemenu.logging import LoggerFactory

if TYPE_CHECKING:
    from treemenu.ui.display import DisplaySink
    from treemenu.ui.input import InputSource

log = LoggerFactory.for_dispatch(job_id="-")


class AwaitingResultFlag:
    """Shared flag that is set while an asynchronous action owes a result.

    The navigation thread sets it before invoking the action and polls it;
    a completion callback on any thread clears it. Every access holds the lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._waiting = False

    @property
    def is_set(self) -> bool:
        with self._lock:
            return self._waiting

    def exchange(self, value: bool) -> bool:
        """Store ``value`` and return the previous value."""
        with self._lock:
            previous = self._waiting
            self._waiting = value
            return previous

    def set(self) -> None:
        self.exchange(True)

    def clear(self) -> bool:
        """Clear the flag. Returns True if this call is the one that cleared it."""
        return self.exchange(False)


@dataclass
class AppContext:
    display: Optional[DisplaySink] = None
    input: Optional[InputSource] = None
    awaiting_result: AwaitingResultFlag = field(default_factory=AwaitingResultFlag)

    def signal_completion(self) -> None:
        """Tell a waiting dispatcher that the asynchronous action has finished."""
        if self.awaiting_result.clear():
            log.debug("Asynchronous result signalled")
        else:
            log.debug("Completion signalled with no action waiting")

    def report_result(self, response: str) -> None:
        """Show the response of an asynchronous action, then signal completion."""
        if self.display is not None:
            self.display.write_title("RESPONSE STRING:")
            self.display.write_line(response)
            self.display.write_line()
        self.signal_completion()
