"""Tests for pull request snapshots and signature models."""

from pathlib import Path

import pytest

from prpolicy.common.errors import ContextError
from prpolicy.pull.context import SnapshotContext
from prpolicy.pull.models import SignatureType


class TestSignatureType:
    def test_parse_case_insensitive(self):
        assert SignatureType.parse("GPG") is SignatureType.GPG
        assert SignatureType.parse("ssh") is SignatureType.SSH

    def test_parse_unknown(self):
        assert SignatureType.parse("smime") is SignatureType.OTHER


class TestSnapshotContext:
    def test_from_file(self, snapshot_file: Path):
        prctx = SnapshotContext.from_file(snapshot_file)
        assert prctx.title() == "feat: add signature checks"
        commits = prctx.commits()
        assert [c.sha for c in commits] == ["0123456789abcdef0123", "fedcba9876543210fedc"]
        assert commits[1].signature.type is SignatureType.GPG
        assert commits[1].signature.key_id == "KEY2"

    def test_memberships(self, snapshot_file: Path):
        prctx = SnapshotContext.from_file(snapshot_file)
        assert prctx.is_team_member("acme/maintainers", "bob") is True
        assert prctx.is_org_member("acme", "eve") is False

    def test_unknown_group_raises(self, snapshot_file: Path):
        prctx = SnapshotContext.from_file(snapshot_file)
        with pytest.raises(ContextError):
            prctx.is_team_member("other/team", "bob")

    def test_unsigned_commit(self):
        prctx = SnapshotContext.from_dict({"commits": [{"sha": "abc"}]})
        assert prctx.commits()[0].signature is None

    def test_invalid_signature_gets_state(self):
        prctx = SnapshotContext.from_dict({
            "commits": [{"sha": "abc", "signature": {"type": "gpg", "valid": False}}],
        })
        sig = prctx.commits()[0].signature
        assert sig.is_valid is False
        assert sig.state == "unknown"

    def test_key_id_dropped_for_non_gpg(self):
        prctx = SnapshotContext.from_dict({
            "commits": [{"sha": "abc", "signature": {"type": "ssh", "valid": True, "key_id": "X"}}],
        })
        assert prctx.commits()[0].signature.key_id == ""

    def test_commits_error(self):
        prctx = SnapshotContext.from_dict({"title": "t", "commits_error": "rate limited"})
        assert prctx.title() == "t"
        with pytest.raises(ContextError, match="rate limited"):
            prctx.commits()

    def test_malformed_commit(self):
        with pytest.raises(ContextError):
            SnapshotContext.from_dict({"commits": [{"signature": {}}]})

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ContextError):
            SnapshotContext.from_file(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yml"
        path.write_text("commits: [unclosed")
        with pytest.raises(ContextError):
            SnapshotContext.from_file(path)

    def test_string_valid_flag_rejected(self):
        with pytest.raises(ContextError, match="'valid' must be true or false"):
            SnapshotContext.from_dict({
                "commits": [{
                    "sha": "abcdef1234567890",
                    "signature": {"type": "gpg", "valid": "false", "signer": "a"},
                }],
            })

    def test_string_valid_flag_rejected_from_yaml(self, tmp_path: Path):
        path = tmp_path / "pr.yml"
        path.write_text(
            "commits:\n"
            "  - sha: abcdef1234567890\n"
            "    signature: {type: gpg, valid: 'no', signer: a}\n"
        )
        with pytest.raises(ContextError):
            SnapshotContext.from_file(path)

    def test_null_state_becomes_unknown(self):
        prctx = SnapshotContext.from_dict({
            "commits": [{
                "sha": "abcdef1234567890",
                "signature": {"type": "gpg", "valid": False, "state": None},
            }],
        })
        assert prctx.commits()[0].signature.state == "unknown"

    def test_null_signer_is_empty(self):
        prctx = SnapshotContext.from_dict({
            "commits": [{
                "sha": "abcdef1234567890",
                "signature": {"type": "gpg", "valid": True, "signer": None, "key_id": None},
            }],
        })
        sig = prctx.commits()[0].signature
        assert sig.signer == ""
        assert sig.key_id == ""

    def test_null_title_is_empty(self):
        assert SnapshotContext.from_dict({"title": None}).title() == ""
