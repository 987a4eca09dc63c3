"""Shared building blocks — triggers, regex sets, actors, evaluation context."""

from prpolicy.common.actors import ActorMembership, Actors
from prpolicy.common.context import EvalContext
from prpolicy.common.errors import (
    ContextError,
    EvaluationCancelled,
    EvaluationError,
    PolicyError,
)
from prpolicy.common.regexp import RegexSet
from prpolicy.common.trigger import Trigger

__all__ = [
    "ActorMembership",
    "Actors",
    "ContextError",
    "EvalContext",
    "EvaluationCancelled",
    "EvaluationError",
    "PolicyError",
    "RegexSet",
    "Trigger",
]
