"""Data models for commits and their signatures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SignatureType(str, Enum):
    GPG = "gpg"
    SSH = "ssh"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> "SignatureType":
        """Lenient lookup; anything unrecognised is OTHER."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class Signature:
    """Cryptographic signature metadata attached to a commit."""

    type: SignatureType
    is_valid: bool
    state: str = ""  # reason when is_valid is False, e.g. 'unknown_key'
    signer: str = ""
    key_id: str = ""  # GPG only


@dataclass(frozen=True)
class Commit:
    sha: str
    signature: Optional[Signature] = None  # None when no signing metadata was found

    @property
    def short_sha(self) -> str:
        return self.sha[:10]
