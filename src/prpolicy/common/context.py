"""Cancellation-capable evaluation context."""

from __future__ import annotations

import threading

from prpolicy.common.errors import EvaluationCancelled


class EvalContext:
    """Execution context handed to every ``evaluate`` call.

    Cancellation is cooperative: collaborators call :meth:`check` between
    units of work. The context is passed through unchanged, never copied.
    """

    def __init__(self) -> None:
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def check(self) -> None:
        """Raise EvaluationCancelled if :meth:`cancel` has been called."""
        if self._cancelled.is_set():
            raise EvaluationCancelled("evaluation cancelled")
