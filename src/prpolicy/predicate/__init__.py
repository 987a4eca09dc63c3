"""Policy predicates — title and commit signature conditions."""

from prpolicy.predicate.base import Predicate, PredicateResult
from prpolicy.predicate.registry import PredicateRegistry, default_registry, load_predicates
from prpolicy.predicate.signature import (
    HasValidSignatures,
    HasValidSignaturesBy,
    HasValidSignaturesByKeys,
    has_valid_signature,
)
from prpolicy.predicate.title import Title

__all__ = [
    "HasValidSignatures",
    "HasValidSignaturesBy",
    "HasValidSignaturesByKeys",
    "Predicate",
    "PredicateRegistry",
    "PredicateResult",
    "Title",
    "default_registry",
    "has_valid_signature",
    "load_predicates",
]
