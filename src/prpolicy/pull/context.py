"""Pull-request context contract and a YAML-backed snapshot implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence

import yaml

from prpolicy.common.errors import ContextError
from prpolicy.pull.models import Commit, Signature, SignatureType


class PullRequestContext(Protocol):
    """Read-only view of a pull request.

    ``commits``, ``is_team_member`` and ``is_org_member`` may raise
    ContextError; ``title`` always succeeds.
    """

    def title(self) -> str:
        ...

    def commits(self) -> List[Commit]:
        ...

    def is_team_member(self, team: str, user: str) -> bool:
        ...

    def is_org_member(self, org: str, user: str) -> bool:
        ...


class SnapshotContext:
    """A pull request captured as plain data (title, commits, memberships).

    Usage::

        prctx = SnapshotContext.from_file(Path("pr.yml"))
        prctx.commits()
    """

    def __init__(
        self,
        title: str = "",
        commits: Sequence[Commit] = (),
        teams: Optional[Mapping[str, Sequence[str]]] = None,
        organizations: Optional[Mapping[str, Sequence[str]]] = None,
        commits_error: Optional[str] = None,
    ) -> None:
        self._title = title
        self._commits = list(commits)
        self._teams = {k: frozenset(v) for k, v in (teams or {}).items()}
        self._orgs = {k: frozenset(v) for k, v in (organizations or {}).items()}
        self._commits_error = commits_error

    # ---- PullRequestContext ----

    def title(self) -> str:
        return self._title

    def commits(self) -> List[Commit]:
        if self._commits_error:
            raise ContextError(self._commits_error)
        return list(self._commits)

    def is_team_member(self, team: str, user: str) -> bool:
        if team not in self._teams:
            raise ContextError(f"unknown team: {team}")
        return user in self._teams[team]

    def is_org_member(self, org: str, user: str) -> bool:
        if org not in self._orgs:
            raise ContextError(f"unknown organization: {org}")
        return user in self._orgs[org]

    # ---- loading ----

    @classmethod
    def from_file(cls, path: Path) -> "SnapshotContext":
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise ContextError(f"Failed to read pull request snapshot {path}: {exc}") from exc
        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SnapshotContext":
        if not isinstance(data, dict):
            raise ContextError("Pull request snapshot must be a mapping")
        entries = data.get("commits") or []
        if not isinstance(entries, list):
            raise ContextError("'commits' must be a list")
        return cls(
            title=_text(data.get("title")),
            commits=[_parse_commit(entry) for entry in entries],
            teams=_parse_groups(data, "teams"),
            organizations=_parse_groups(data, "organizations"),
            commits_error=data.get("commits_error"),
        )


def _text(value: Any) -> str:
    """Stringify a scalar field; a missing or null value is empty."""
    return "" if value is None else str(value)


def _parse_commit(entry: Any) -> Commit:
    if not isinstance(entry, dict) or "sha" not in entry:
        raise ContextError(f"Commit entry must be a mapping with a 'sha': {entry!r}")
    sig = entry.get("signature")
    if sig is None:
        return Commit(sha=str(entry["sha"]))
    if not isinstance(sig, dict):
        raise ContextError(f"Signature of {entry['sha']} must be a mapping")

    sig_type = SignatureType.parse(sig.get("type", "other"))
    is_valid = sig.get("valid", False)
    if not isinstance(is_valid, bool):
        raise ContextError(f"Signature of {entry['sha']}: 'valid' must be true or false")
    state = _text(sig.get("state"))
    if not is_valid and not state:
        state = "unknown"
    return Commit(
        sha=str(entry["sha"]),
        signature=Signature(
            type=sig_type,
            is_valid=is_valid,
            state=state,
            signer=_text(sig.get("signer")),
            key_id=_text(sig.get("key_id")) if sig_type is SignatureType.GPG else "",
        ),
    )


def _parse_groups(data: Dict[str, Any], section: str) -> Dict[str, List[str]]:
    groups = data.get(section) or {}
    if not isinstance(groups, dict):
        raise ContextError(f"'{section}' must be a mapping of name to member list")
    return {str(name): [str(m) for m in (members or [])] for name, members in groups.items()}
