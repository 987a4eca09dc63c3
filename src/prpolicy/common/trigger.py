"""Webhook event categories that cause a predicate to be re-evaluated."""

from __future__ import annotations

from enum import Flag
from typing import Optional


class Trigger(Flag):
    NONE = 0
    PULL_REQUEST = 1
    COMMIT = 2

    def matches(self, event: "Trigger") -> bool:
        """True if a predicate with this trigger must re-run on *event*."""
        return bool(self & event)

    @property
    def labels(self) -> list[str]:
        return [t.name.lower() for t in (Trigger.PULL_REQUEST, Trigger.COMMIT) if t & self]

    @classmethod
    def parse(cls, value: str) -> Optional["Trigger"]:
        """Map an event name (``pull_request`` / ``commit``) to a Trigger."""
        return _EVENT_NAMES.get(value.strip().lower())


_EVENT_NAMES = {
    "pull_request": Trigger.PULL_REQUEST,
    "commit": Trigger.COMMIT,
    "push": Trigger.COMMIT,
}
