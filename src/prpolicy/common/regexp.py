"""Regex set — patterns stored as strings, compiled when the set is built."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from prpolicy.common.errors import PolicyError


@dataclass(frozen=True)
class RegexSet:
    """An ordered collection of patterns tested with search semantics.

    ``patterns`` keeps the raw strings so the set stays serialisable;
    compiled objects are built once in ``__post_init__``.
    """

    patterns: Tuple[str, ...] = ()
    _compiled: Tuple[re.Pattern[str], ...] = field(
        default=(), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        compiled: List[re.Pattern[str]] = []
        for pat in self.patterns:
            try:
                compiled.append(re.compile(pat))
            except re.error as exc:
                raise PolicyError(f"Invalid pattern {pat!r}: {exc}") from exc
        object.__setattr__(self, "_compiled", tuple(compiled))

    @classmethod
    def of(cls, patterns: Iterable[str] | None) -> "RegexSet":
        return cls(tuple(patterns or ()))

    def __len__(self) -> int:
        return len(self.patterns)

    def __bool__(self) -> bool:
        return bool(self.patterns)

    def any_matches(self, text: str) -> bool:
        """Return True if any pattern is found in *text*."""
        return any(p.search(text) for p in self._compiled)
