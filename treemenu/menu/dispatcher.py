"""Run the action selected from a menu.

Synchronous actions are simply called. Asynchronous actions return at once
and report completion later by clearing the shared awaiting-result flag; the
dispatcher polls that flag until it clears or the abort deadline passes.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable

from treemenu.app.context import AwaitingResultFlag
from treemenu.config import settings
from treemenu.config.settings import (
    DEFAULT_RESULT_ABORT_TIMEOUT,
    DEFAULT_RESULT_POLL_INTERVAL,
)
from treemenu.exceptions import ActionError
from treemenu.logging import operation_context
from treemenu.menu.model import ActionDeclaration


class DispatchOutcome(Enum):
    COMPLETED = "completed"
    ABORTED = "aborted"


class ActionDispatcher:
    def __init__(
        self,
        flag: AwaitingResultFlag,
        *,
        poll_interval: float = DEFAULT_RESULT_POLL_INTERVAL,
        abort_after: float = DEFAULT_RESULT_ABORT_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        if abort_after < 0:
            raise ValueError("abort_after must not be negative")
        self._flag = flag
        self._poll_interval = poll_interval
        self._abort_after = abort_after
        self._clock = clock
        self._sleep = sleep

    @property
    def abort_after(self) -> float:
        return self._abort_after

    def run(self, action: ActionDeclaration) -> DispatchOutcome:
        """Invoke ``action``, waiting for its result if it is asynchronous.

        Raises ActionError if the action raises while being invoked. A wait
        that reaches the deadline is not an error: the flag is cleared and
        ``DispatchOutcome.ABORTED`` is returned.
        """
        with operation_context(
            "action", description=action.description, is_async=action.is_async
        ) as log:
            if not action.is_async:
                self._invoke(action)
                return DispatchOutcome.COMPLETED
            return self._run_async(action, log)

    def _invoke(self, action: ActionDeclaration) -> None:
        try:
            action.invoke()
        except Exception as error:
            raise ActionError(action.description, error) from error

    def _run_async(self, action: ActionDeclaration, log) -> DispatchOutcome:
        deadline = self._clock() + self._abort_after
        self._flag.set()
        try:
            self._invoke(action)
        except ActionError:
            self._flag.clear()
            raise

        while self._flag.is_set and self._clock() < deadline:
            log.trace("Still waiting for asynchronous result")
            self._sleep(self._poll_interval)

        if self._flag.clear():
            log.warning(
                f"No result from '{action.description}' after "
                f"{self._abort_after:g} seconds; abandoning the wait"
            )
            return DispatchOutcome.ABORTED
        return DispatchOutcome.COMPLETED


def dispatcher_from_settings(flag: AwaitingResultFlag) -> ActionDispatcher:
    return ActionDispatcher(
        flag,
        poll_interval=settings.get_float(
            "result_poll_interval_seconds", DEFAULT_RESULT_POLL_INTERVAL
        )
        or DEFAULT_RESULT_POLL_INTERVAL,
        abort_after=settings.get_float(
            "result_abort_timeout_seconds", DEFAULT_RESULT_ABORT_TIMEOUT
        ),
    )
