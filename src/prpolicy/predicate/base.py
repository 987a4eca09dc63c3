"""Predicate contract and result type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol

from prpolicy.common.context import EvalContext
from prpolicy.common.trigger import Trigger
from prpolicy.pull.context import PullRequestContext


@dataclass(frozen=True)
class PredicateResult:
    """Outcome of a successful evaluation.

    ``description`` is non-empty only when there is a definitive
    explanation for the outcome.
    """

    satisfied: bool
    description: str = ""

    def __iter__(self):
        # allows ``ok, why = pred.evaluate(...)``
        return iter((self.satisfied, self.description))


class Predicate(Protocol):
    """A named boolean policy condition.

    ``evaluate`` raises EvaluationError when the outcome cannot be
    determined; an unsatisfied result is returned, never raised.
    """

    key: ClassVar[str]

    def evaluate(self, ctx: EvalContext, prctx: PullRequestContext) -> PredicateResult:
        ...

    def trigger(self) -> Trigger:
        ...
