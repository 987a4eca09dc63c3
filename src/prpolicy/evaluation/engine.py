"""Evaluation engine — runs predicates against a pull request context.

Predicates raise EvaluationError when they cannot decide; this module is
the seam where such failures become values on the report so a caller can
tell "could not evaluate" apart from "evaluated false".
"""

from __future__ import annotations

import logging
import re
import time
from typing import Iterable, Optional

from prpolicy.common.context import EvalContext
from prpolicy.common.errors import EvaluationError
from prpolicy.common.trigger import Trigger
from prpolicy.evaluation.models import EvaluationReport, PredicateOutcome
from prpolicy.predicate.base import Predicate
from prpolicy.pull.context import PullRequestContext

log = logging.getLogger(__name__)

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def predicate_name(predicate: Predicate) -> str:
    """Document key of *predicate*, falling back to its snake-cased class name."""
    key = getattr(predicate, "key", None)
    if key:
        return key
    return _CAMEL_RE.sub("_", type(predicate).__name__).lower()


def _describe_error(exc: EvaluationError) -> str:
    msg = str(exc)
    if exc.__cause__ is not None:
        msg = f"{msg}: {exc.__cause__}"
    return msg


def evaluate(
    predicates: Iterable[Predicate],
    ctx: EvalContext,
    prctx: PullRequestContext,
    *,
    event: Optional[Trigger] = None,
) -> EvaluationReport:
    """Evaluate every predicate. Returns an EvaluationReport.

    With *event* set, predicates whose trigger does not intersect it are
    marked skipped rather than evaluated.
    """
    start = time.perf_counter()
    outcomes = []

    for predicate in predicates:
        name = predicate_name(predicate)
        trigger = predicate.trigger()
        outcome = PredicateOutcome(name=name, trigger=trigger)

        if event is not None and not trigger.matches(event):
            outcome.skipped = True
            outcomes.append(outcome)
            continue

        try:
            result = predicate.evaluate(ctx, prctx)
        except EvaluationError as exc:
            outcome.error = _describe_error(exc)
            log.warning("could not evaluate %s: %s", name, outcome.error)
        else:
            outcome.satisfied = result.satisfied
            outcome.description = result.description
            log.debug(
                "%s: %s %s",
                name,
                "satisfied" if result.satisfied else "unsatisfied",
                result.description,
            )
        outcomes.append(outcome)

    elapsed = (time.perf_counter() - start) * 1000
    return EvaluationReport(outcomes=outcomes, event=event, duration_ms=round(elapsed, 2))
