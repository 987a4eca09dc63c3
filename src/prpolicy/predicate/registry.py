"""Predicate registry — maps document keys to factories, loads YAML policies."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml

from prpolicy.common.actors import Actors
from prpolicy.common.errors import PolicyError
from prpolicy.common.regexp import RegexSet
from prpolicy.predicate.base import Predicate
from prpolicy.predicate.signature import (
    HasValidSignatures,
    HasValidSignaturesBy,
    HasValidSignaturesByKeys,
)
from prpolicy.predicate.title import Title

Factory = Callable[[Any], Predicate]


def _string_list(value: Any, what: str) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, list):
        raise PolicyError(f"{what} must be a list of strings")
    return [str(v) for v in value]


def _mapping(value: Any, key: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise PolicyError(f"'{key}' must be a mapping")
    return value


def build_title(value: Any) -> Title:
    data = _mapping(value, Title.key)
    return Title(
        matches=RegexSet.of(_string_list(data.get("matches"), "title.matches")),
        not_matches=RegexSet.of(_string_list(data.get("not_matches"), "title.not_matches")),
    )


def build_has_valid_signatures(value: Any) -> HasValidSignatures:
    if not isinstance(value, bool):
        raise PolicyError(f"'{HasValidSignatures.key}' must be true or false")
    return HasValidSignatures(required=value)


def build_has_valid_signatures_by(value: Any) -> HasValidSignaturesBy:
    key = HasValidSignaturesBy.key
    data = _mapping(value, key)
    actors = Actors(
        users=tuple(_string_list(data.get("users"), f"{key}.users")),
        teams=tuple(_string_list(data.get("teams"), f"{key}.teams")),
        organizations=tuple(_string_list(data.get("organizations"), f"{key}.organizations")),
    )
    return HasValidSignaturesBy(actors=actors)


def build_has_valid_signatures_by_keys(value: Any) -> HasValidSignaturesByKeys:
    key = HasValidSignaturesByKeys.key
    data = _mapping(value, key)
    return HasValidSignaturesByKeys(
        key_ids=tuple(_string_list(data.get("key_ids"), f"{key}.key_ids"))
    )


class PredicateRegistry:
    """Central store of predicate factories, keyed by document key."""

    def __init__(self) -> None:
        self._factories: Dict[str, Factory] = {}

    def register(self, key: str, factory: Factory) -> None:
        self._factories[key] = factory

    @property
    def keys(self) -> List[str]:
        return list(self._factories)

    def get(self, key: str) -> Optional[Factory]:
        return self._factories.get(key)

    def build(self, key: str, value: Any) -> Predicate:
        factory = self._factories.get(key)
        if factory is None:
            raise PolicyError(f"Unknown predicate: {key}")
        return factory(value)

    def build_all(self, document: Any) -> List[Predicate]:
        """Build every predicate under ``predicates:``, in document order."""
        if document is None:
            return []
        if not isinstance(document, dict):
            raise PolicyError("Policy document must be a mapping")
        section = _mapping(document.get("predicates"), "predicates")
        return [self.build(key, value) for key, value in section.items()]


def default_registry() -> PredicateRegistry:
    """Registry populated with the built-in predicates."""
    registry = PredicateRegistry()
    registry.register(Title.key, build_title)
    registry.register(HasValidSignatures.key, build_has_valid_signatures)
    registry.register(HasValidSignaturesBy.key, build_has_valid_signatures_by)
    registry.register(HasValidSignaturesByKeys.key, build_has_valid_signatures_by_keys)
    return registry


def load_predicates(path: Path, registry: Optional[PredicateRegistry] = None) -> List[Predicate]:
    """Read a YAML policy document and build its predicates."""
    registry = registry or default_registry()
    try:
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise PolicyError(f"Failed to read policy {path}: {exc}") from exc
    return registry.build_all(document)
