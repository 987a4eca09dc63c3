"""Tests for actor membership resolution and the evaluation context."""

import pytest

from prpolicy.common.actors import Actors
from prpolicy.common.context import EvalContext
from prpolicy.common.errors import ContextError, EvaluationCancelled, EvaluationError


class TestActors:
    def test_listed_user(self, ctx, make_context):
        prctx = make_context()
        assert Actors(users=("alice",)).is_actor(ctx, prctx, "alice") is True
        assert prctx.lookups == []

    def test_team_member(self, ctx, make_context):
        prctx = make_context(teams={"acme/core": {"bob"}})
        assert Actors(teams=("acme/core",)).is_actor(ctx, prctx, "bob") is True

    def test_org_member(self, ctx, make_context):
        prctx = make_context(teams={"acme/core": set()}, orgs={"acme": {"carol"}})
        actors = Actors(teams=("acme/core",), organizations=("acme",))
        assert actors.is_actor(ctx, prctx, "carol") is True
        assert prctx.lookups == ["team:acme/core:carol", "org:acme:carol"]

    def test_not_a_member(self, ctx, make_context):
        prctx = make_context(orgs={"acme": {"carol"}})
        assert Actors(users=("alice",), organizations=("acme",)).is_actor(ctx, prctx, "eve") is False

    def test_empty_spec(self, ctx, make_context):
        assert Actors().is_actor(ctx, make_context(), "anyone") is False

    def test_lookup_failure_wrapped(self, ctx, make_context):
        with pytest.raises(EvaluationError, match="team membership") as info:
            Actors(teams=("ghost/team",)).is_actor(ctx, make_context(), "bob")
        assert isinstance(info.value.__cause__, ContextError)

    def test_cancelled_between_lookups(self, make_context):
        ctx = EvalContext()
        ctx.cancel()
        prctx = make_context(teams={"acme/core": {"bob"}})
        with pytest.raises(EvaluationCancelled):
            Actors(teams=("acme/core",)).is_actor(ctx, prctx, "bob")
        assert prctx.lookups == []


class TestEvalContext:
    def test_starts_active(self):
        ctx = EvalContext()
        assert ctx.cancelled is False
        ctx.check()

    def test_cancel(self):
        ctx = EvalContext()
        ctx.cancel()
        assert ctx.cancelled is True
        with pytest.raises(EvaluationError):
            ctx.check()
