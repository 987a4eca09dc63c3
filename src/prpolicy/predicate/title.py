"""Pull request title predicate."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar

from prpolicy.common.context import EvalContext
from prpolicy.common.regexp import RegexSet
from prpolicy.common.trigger import Trigger
from prpolicy.predicate.base import PredicateResult
from prpolicy.pull.context import PullRequestContext

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Title:
    """Satisfied when the title matches ``matches`` or avoids ``not_matches``.

    ``matches`` is checked first; the first satisfied branch wins. With
    both sets empty the predicate is never satisfied.
    """

    key: ClassVar[str] = "title"

    matches: RegexSet = field(default_factory=RegexSet)
    not_matches: RegexSet = field(default_factory=RegexSet)

    def evaluate(self, ctx: EvalContext, prctx: PullRequestContext) -> PredicateResult:
        title = prctx.title()

        if self.matches and self.matches.any_matches(title):
            return PredicateResult(True, "PR Title matches a Match pattern")

        if self.not_matches and not self.not_matches.any_matches(title):
            return PredicateResult(True, "PR Title doesn't match a NotMatch pattern")

        log.debug("title %r satisfies neither pattern set", title)
        return PredicateResult(False, "")

    def trigger(self) -> Trigger:
        return Trigger.PULL_REQUEST
