"""Actor membership — who counts as an authorized signer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Tuple

from prpolicy.common.errors import ContextError, EvaluationError

if TYPE_CHECKING:
    from prpolicy.common.context import EvalContext
    from prpolicy.pull.context import PullRequestContext

log = logging.getLogger(__name__)


class ActorMembership(Protocol):
    """Capability deciding whether an identity belongs to a configured group."""

    def is_actor(self, ctx: "EvalContext", prctx: "PullRequestContext", user: str) -> bool:
        ...


@dataclass(frozen=True)
class Actors:
    """Users, teams (``org/slug``), and organizations whose members qualify."""

    users: Tuple[str, ...] = ()
    teams: Tuple[str, ...] = ()
    organizations: Tuple[str, ...] = ()

    def is_actor(self, ctx: "EvalContext", prctx: "PullRequestContext", user: str) -> bool:
        """Return True if *user* is listed directly or via a team or organization.

        Raises:
            EvaluationError: a team or organization lookup failed.
        """
        if user in self.users:
            return True

        for team in self.teams:
            ctx.check()
            try:
                if prctx.is_team_member(team, user):
                    return True
            except ContextError as exc:
                raise EvaluationError(f"failed to get team membership for {team}") from exc

        for org in self.organizations:
            ctx.check()
            try:
                if prctx.is_org_member(org, user):
                    return True
            except ContextError as exc:
                raise EvaluationError(f"failed to get organization membership for {org}") from exc

        log.debug("user %s is not a member of any configured actor group", user)
        return False
