"""Exception types shared across predicates, contexts, and loaders."""

from __future__ import annotations


class EvaluationError(Exception):
    """Raised when a predicate cannot be evaluated.

    This is never a synonym for "unsatisfied": callers must treat it as an
    undetermined outcome and surface it.
    """


class EvaluationCancelled(EvaluationError):
    """Raised when the evaluation context was cancelled mid-evaluation."""


class ContextError(Exception):
    """Raised by a pull-request context when data cannot be fetched."""


class PolicyError(Exception):
    """Raised when a predicate document is malformed."""
