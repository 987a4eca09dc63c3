"""Evaluation engine and report models."""

from prpolicy.evaluation.engine import evaluate, predicate_name
from prpolicy.evaluation.models import EvaluationReport, PredicateOutcome

__all__ = ["EvaluationReport", "PredicateOutcome", "evaluate", "predicate_name"]
