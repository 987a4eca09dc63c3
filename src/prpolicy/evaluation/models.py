"""Evaluation report models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from prpolicy.common.trigger import Trigger


@dataclass
class PredicateOutcome:
    """Result of one predicate, with failures carried as values."""

    name: str
    trigger: Trigger
    satisfied: bool = False
    description: str = ""
    error: Optional[str] = None  # set when the predicate could not be evaluated
    skipped: bool = False  # trigger did not match the event

    @property
    def status(self) -> str:
        if self.skipped:
            return "skipped"
        if self.error is not None:
            return "error"
        return "satisfied" if self.satisfied else "unsatisfied"


@dataclass
class EvaluationReport:
    """Complete result of evaluating a policy against one pull request."""

    outcomes: List[PredicateOutcome] = field(default_factory=list)
    event: Optional[Trigger] = None
    duration_ms: float = 0.0

    @property
    def evaluated(self) -> List[PredicateOutcome]:
        return [o for o in self.outcomes if not o.skipped]

    @property
    def errors(self) -> List[PredicateOutcome]:
        return [o for o in self.evaluated if o.error is not None]

    @property
    def unsatisfied(self) -> List[PredicateOutcome]:
        return [o for o in self.evaluated if o.error is None and not o.satisfied]

    @property
    def failed(self) -> bool:
        return bool(self.errors)

    @property
    def satisfied(self) -> bool:
        return not self.failed and not self.unsatisfied
