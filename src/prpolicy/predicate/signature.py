"""Commit signature predicates.

All three predicates share :func:`has_valid_signature` and stop scanning
as soon as the outcome is known. Distinct signers and keys are checked in
the order they first appear in the commit list, so the reported failure
is deterministic for a given pull request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Tuple

from prpolicy.common.actors import ActorMembership, Actors
from prpolicy.common.context import EvalContext
from prpolicy.common.errors import ContextError, EvaluationError
from prpolicy.common.trigger import Trigger
from prpolicy.predicate.base import PredicateResult
from prpolicy.pull.context import PullRequestContext
from prpolicy.pull.models import Commit, SignatureType

log = logging.getLogger(__name__)


def has_valid_signature(commit: Commit) -> Tuple[bool, str]:
    """Classify one commit's signature. Returns (valid, reason)."""
    if commit.signature is None:
        return False, f"Commit {commit.short_sha} has no signature"
    if not commit.signature.is_valid:
        return False, (
            f"Commit {commit.short_sha} has an invalid signature "
            f"due to {commit.signature.state}"
        )
    return True, ""


def _get_commits(ctx: EvalContext, prctx: PullRequestContext) -> List[Commit]:
    ctx.check()
    try:
        return prctx.commits()
    except ContextError as exc:
        raise EvaluationError("failed to get commits") from exc


@dataclass(frozen=True)
class HasValidSignatures:
    """Proves "every commit is validly signed" equals ``required``."""

    key: ClassVar[str] = "has_valid_signatures"

    required: bool = True

    def evaluate(self, ctx: EvalContext, prctx: PullRequestContext) -> PredicateResult:
        for commit in _get_commits(ctx, prctx):
            valid, reason = has_valid_signature(commit)
            if not valid:
                log.debug("first invalid commit: %s", reason)
                if self.required:
                    return PredicateResult(False, reason)
                return PredicateResult(True, "")

        if self.required:
            return PredicateResult(True, "")
        return PredicateResult(False, "All commits are signed and have valid signatures")

    def trigger(self) -> Trigger:
        return Trigger.COMMIT


@dataclass(frozen=True)
class HasValidSignaturesBy:
    """Every commit is validly signed by a member of ``actors``."""

    key: ClassVar[str] = "has_valid_signatures_by"

    actors: ActorMembership = field(default_factory=Actors)

    def evaluate(self, ctx: EvalContext, prctx: PullRequestContext) -> PredicateResult:
        signers: Dict[str, None] = {}

        for commit in _get_commits(ctx, prctx):
            valid, reason = has_valid_signature(commit)
            if not valid:
                return PredicateResult(False, reason)
            assert commit.signature is not None
            signers.setdefault(commit.signature.signer)

        for signer in signers:
            try:
                member = self.actors.is_actor(ctx, prctx, signer)
            except ContextError as exc:
                raise EvaluationError(f"failed to resolve membership for {signer}") from exc
            if not member:
                return PredicateResult(
                    False,
                    f'Contributor "{signer}" does not meet the required '
                    "membership conditions for signing",
                )

        log.debug("all %d signer(s) are authorized", len(signers))
        return PredicateResult(True, "")

    def trigger(self) -> Trigger:
        return Trigger.COMMIT


@dataclass(frozen=True)
class HasValidSignaturesByKeys:
    """Every commit carries a valid GPG signature from an allow-listed key."""

    key: ClassVar[str] = "has_valid_signatures_by_keys"

    key_ids: Tuple[str, ...] = ()

    def evaluate(self, ctx: EvalContext, prctx: PullRequestContext) -> PredicateResult:
        keys: Dict[str, None] = {}

        for commit in _get_commits(ctx, prctx):
            valid, reason = has_valid_signature(commit)
            if not valid:
                return PredicateResult(False, reason)
            assert commit.signature is not None
            # Only GPG signatures carry a key ID to check
            if commit.signature.type is not SignatureType.GPG:
                return PredicateResult(
                    False, f"Commit {commit.short_sha} signature is not a GPG signature"
                )
            keys.setdefault(commit.signature.key_id)

        for key_id in keys:
            if key_id not in self.key_ids:
                return PredicateResult(
                    False,
                    f'Key "{key_id}" does not meet the required key conditions for signing',
                )

        return PredicateResult(True, "")

    def trigger(self) -> Trigger:
        return Trigger.COMMIT
