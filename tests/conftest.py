"""Shared test fixtures — commits, fake contexts, sample documents."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Dict, List, Optional, Set

import pytest

from prpolicy.common.context import EvalContext
from prpolicy.common.errors import ContextError
from prpolicy.pull.models import Commit, Signature, SignatureType


class FakeContext:
    """In-memory pull request that records how it was read."""

    def __init__(
        self,
        title: str = "",
        commits: Optional[List[Commit]] = None,
        teams: Optional[Dict[str, Set[str]]] = None,
        orgs: Optional[Dict[str, Set[str]]] = None,
        commits_error: Optional[str] = None,
    ) -> None:
        self._title = title
        self._commits = commits or []
        self._teams = teams or {}
        self._orgs = orgs or {}
        self._commits_error = commits_error
        self.commit_fetches = 0
        self.lookups: List[str] = []

    def title(self) -> str:
        return self._title

    def commits(self) -> List[Commit]:
        self.commit_fetches += 1
        if self._commits_error:
            raise ContextError(self._commits_error)
        return list(self._commits)

    def is_team_member(self, team: str, user: str) -> bool:
        self.lookups.append(f"team:{team}:{user}")
        if team not in self._teams:
            raise ContextError(f"unknown team: {team}")
        return user in self._teams[team]

    def is_org_member(self, org: str, user: str) -> bool:
        self.lookups.append(f"org:{org}:{user}")
        if org not in self._orgs:
            raise ContextError(f"unknown organization: {org}")
        return user in self._orgs[org]


class FakeMembership:
    """ActorMembership fake with a fixed member set."""

    def __init__(self, members: Set[str], error: Optional[Exception] = None) -> None:
        self.members = members
        self.error = error
        self.calls: List[str] = []
        self.contexts: List[EvalContext] = []

    def is_actor(self, ctx, prctx, user: str) -> bool:
        self.calls.append(user)
        self.contexts.append(ctx)
        if self.error is not None:
            raise self.error
        return user in self.members


def gpg_commit(sha: str, signer: str = "alice", key_id: str = "KEY1", valid: bool = True) -> Commit:
    return Commit(
        sha=sha,
        signature=Signature(
            type=SignatureType.GPG,
            is_valid=valid,
            state="" if valid else "unknown_key",
            signer=signer,
            key_id=key_id,
        ),
    )


def ssh_commit(sha: str, signer: str = "alice") -> Commit:
    return Commit(
        sha=sha,
        signature=Signature(type=SignatureType.SSH, is_valid=True, signer=signer),
    )


@pytest.fixture
def ctx() -> EvalContext:
    return EvalContext()


@pytest.fixture
def make_context():
    return FakeContext


@pytest.fixture
def make_membership():
    return FakeMembership


@pytest.fixture
def gpg():
    return gpg_commit


@pytest.fixture
def ssh():
    return ssh_commit


@pytest.fixture
def unsigned():
    return lambda sha: Commit(sha=sha)


@pytest.fixture
def sample_policy() -> str:
    """A policy document using every built-in predicate."""
    return textwrap.dedent("""\
        predicates:
          title:
            matches: ["^feat:"]
            not_matches: ["WIP"]
          has_valid_signatures: true
          has_valid_signatures_by:
            users: ["alice"]
            teams: ["acme/maintainers"]
            organizations: ["acme"]
          has_valid_signatures_by_keys:
            key_ids: ["KEY1", "KEY2"]
    """)


@pytest.fixture
def sample_snapshot() -> str:
    """A pull request whose commits are all GPG-signed by acme members."""
    return textwrap.dedent("""\
        title: "feat: add signature checks"
        commits:
          - sha: 0123456789abcdef0123
            signature: {type: gpg, valid: true, signer: alice, key_id: KEY1}
          - sha: fedcba9876543210fedc
            signature: {type: GPG, valid: true, signer: bob, key_id: KEY2}
        teams:
          acme/maintainers: [bob]
        organizations:
          acme: [alice, bob]
    """)


@pytest.fixture
def policy_file(tmp_path: Path, sample_policy: str) -> Path:
    path = tmp_path / ".prpolicy.yml"
    path.write_text(sample_policy)
    return path


@pytest.fixture
def snapshot_file(tmp_path: Path, sample_snapshot: str) -> Path:
    path = tmp_path / "pr.yml"
    path.write_text(sample_snapshot)
    return path
