"""Pull-request data model and context contract."""

from prpolicy.pull.context import PullRequestContext, SnapshotContext
from prpolicy.pull.models import Commit, Signature, SignatureType

__all__ = [
    "Commit",
    "PullRequestContext",
    "Signature",
    "SignatureType",
    "SnapshotContext",
]
