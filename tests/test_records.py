"""
Tests for SourceCredentialRecord invariants.
"""

import dataclasses

import pytest

from sourcecreds.errors import InconsistentRecordError
from sourcecreds.records import AuthType, ServerType, SourceCredentialRecord
from sourcecreds.secret import MASK


class TestSourceCredentialRecord:

    def test_enum_wire_values(self):
        assert [s.value for s in ServerType] == ["GITHUB", "GITHUB_ENTERPRISE", "BITBUCKET"]
        assert [a.value for a in AuthType] == ["PERSONAL_ACCESS_TOKEN", "CODECONNECTIONS", "BASIC_AUTH"]

    def test_accepts_string_enums(self):
        record = SourceCredentialRecord("GITHUB", "PERSONAL_ACCESS_TOKEN", token="t")

        assert record.server_type is ServerType.GITHUB
        assert record.auth_type is AuthType.PERSONAL_ACCESS_TOKEN

    def test_immutable(self):
        record = SourceCredentialRecord(ServerType.GITHUB, AuthType.PERSONAL_ACCESS_TOKEN, token="t")

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.token = "other"

    def test_token_required(self):
        with pytest.raises(InconsistentRecordError):
            SourceCredentialRecord(ServerType.GITHUB, AuthType.PERSONAL_ACCESS_TOKEN)

    def test_basic_auth_requires_username(self):
        with pytest.raises(InconsistentRecordError):
            SourceCredentialRecord(ServerType.BITBUCKET, AuthType.BASIC_AUTH, token="p")

    @pytest.mark.parametrize("auth_type", [AuthType.PERSONAL_ACCESS_TOKEN, AuthType.CODECONNECTIONS])
    def test_username_only_for_basic_auth(self, auth_type):
        with pytest.raises(InconsistentRecordError):
            SourceCredentialRecord(ServerType.GITHUB, auth_type, token="t", username="u")

    def test_describe_masks_secrets(self):
        record = SourceCredentialRecord(ServerType.BITBUCKET, AuthType.BASIC_AUTH,
                                        token="p4ss", username="me")

        assert record.describe() == {
            'serverType': 'BITBUCKET',
            'authType': 'BASIC_AUTH',
            'token': MASK,
            'username': MASK,
        }
        assert "p4ss" not in repr(record)
        assert "'me'" not in repr(record)

    def test_describe_keeps_connection_arn(self, connection_arn):
        record = SourceCredentialRecord(ServerType.GITHUB, AuthType.CODECONNECTIONS, token=connection_arn)

        assert record.describe()['token'] == connection_arn
