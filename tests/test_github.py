"""
Tests for the GitHub credential validator.
"""

import pytest

from sourcecreds.errors import (
    ConflictingCredentialsError,
    CredentialValidationError,
    MalformedConnectionArnError,
    MissingCredentialError,
)
from sourcecreds.records import AuthType, ServerType, SourceCredentialRecord
from sourcecreds.secret import SecretValue
from sourcecreds.validators import (
    GitHubCredentialValidator,
    GitHubCredentialsInput,
    validate_connection_arn,
    validate_github,
)


class TestGitHubPresenceRules:
    """Exactly one of accessToken and connectionArn is accepted."""

    def test_neither_set_is_missing(self):
        with pytest.raises(MissingCredentialError) as exc_info:
            GitHubCredentialValidator().validate(GitHubCredentialsInput())

        assert exc_info.value.message == "Either accessToken or connectionArn must be provided"

    def test_both_set_conflict(self, connection_arn):
        credentials = GitHubCredentialsInput(
            access_token=SecretValue("tok1"),
            connection_arn=connection_arn,
        )

        with pytest.raises(ConflictingCredentialsError) as exc_info:
            GitHubCredentialValidator().validate(credentials)

        assert "Cannot provide both accessToken and connectionArn" in exc_info.value.message
        assert "personal access token" in exc_info.value.message
        assert "CodeConnections" in exc_info.value.message

    def test_conflict_checked_before_arn_shape(self):
        credentials = GitHubCredentialsInput(
            access_token=SecretValue("tok1"),
            connection_arn="not-an-arn",
        )

        with pytest.raises(ConflictingCredentialsError):
            GitHubCredentialValidator().validate(credentials)

    def test_empty_token_counts_as_present(self):
        record = validate_github(access_token=SecretValue(""))

        assert record.auth_type is AuthType.PERSONAL_ACCESS_TOKEN
        assert record.token == ""

    def test_errors_share_base_class(self):
        with pytest.raises(CredentialValidationError):
            validate_github()

    def test_error_context_does_not_leak_token(self, connection_arn):
        with pytest.raises(ConflictingCredentialsError) as exc_info:
            validate_github(access_token=SecretValue("super-secret"), connection_arn=connection_arn)

        assert "super-secret" not in str(exc_info.value)


class TestGitHubRecords:
    """Records produced from valid GitHub input."""

    def test_connection_arn_record(self, connection_arn):
        record = validate_github(connection_arn=connection_arn)

        assert record == SourceCredentialRecord(
            server_type=ServerType.GITHUB,
            auth_type=AuthType.CODECONNECTIONS,
            token=connection_arn,
        )
        assert record.username is None

    def test_legacy_connection_arn_record(self, legacy_connection_arn):
        record = validate_github(connection_arn=legacy_connection_arn)

        assert record.auth_type is AuthType.CODECONNECTIONS
        assert record.token == legacy_connection_arn

    def test_access_token_record(self):
        record = validate_github(access_token=SecretValue("t"))

        assert record.to_properties() == {
            'serverType': 'GITHUB',
            'authType': 'PERSONAL_ACCESS_TOKEN',
            'token': 't',
        }

    def test_validation_is_repeatable(self, access_token):
        validator = GitHubCredentialValidator()
        credentials = GitHubCredentialsInput(access_token=access_token)

        assert validator.validate(credentials) == validator.validate(credentials)

    def test_plain_string_token_rejected(self):
        with pytest.raises(TypeError) as exc_info:
            GitHubCredentialValidator().validate(GitHubCredentialsInput(access_token="tok"))

        assert "accessToken as SecretValue" in str(exc_info.value)

    def test_rejects_wrong_input_type(self):
        with pytest.raises(TypeError):
            GitHubCredentialValidator().validate({'accessToken': 'tok'})


class TestConnectionArnFormat:
    """Shape checks for connection ARNs."""

    @pytest.mark.parametrize("arn", [
        "arn:aws:codeconnections:us-east-1:123456789012:connection/abc-123",
        "arn:aws:codestar-connections:us-east-1:123456789012:connection/abc-123",
        "arn:aws-cn:codeconnections:cn-north-1:123456789012:connection/ABC",
        "arn:aws-us-gov:codestar-connections:us-gov-west-1:1:connection/-",
        # partition, region and account are not checked against real AWS values
        "arn:x:codeconnections:y:z:connection/id",
    ])
    def test_accepts(self, arn):
        assert validate_connection_arn(arn) == arn
        assert validate_github(connection_arn=arn).token == arn

    @pytest.mark.parametrize("arn", [
        "not-an-arn",
        "",
        "arn:aws:codestar:us-east-1:123456789012:connection/abc",
        "arn:aws:CodeConnections:us-east-1:123456789012:connection/abc",
        "arn::codeconnections:us-east-1:123456789012:connection/abc",
        "arn:aws:codeconnections::123456789012:connection/abc",
        "arn:aws:codeconnections:us-east-1::connection/abc",
        "arn:aws:codeconnections:us-east-1:123456789012:connection/",
        "arn:aws:codeconnections:us-east-1:123456789012:connection/abc_def",
        "arn:aws:codeconnections:us-east-1:123456789012:host/abc",
        "arn:aws:codeconnections:us-east-1:123456789012:connection/abc/def",
        "arn:aws:codeconnections:us-east-1:123456789012:connection/abc\n",
        " arn:aws:codeconnections:us-east-1:123456789012:connection/abc",
        "xarn:aws:codeconnections:us-east-1:123456789012:connection/abc",
    ])
    def test_rejects(self, arn):
        with pytest.raises(MalformedConnectionArnError) as exc_info:
            validate_github(connection_arn=arn)

        message = exc_info.value.message
        assert message.startswith("Invalid connectionArn format.")
        assert "arn:partition:codeconnections:region:account:connection/connection-id" in message
        assert "arn:partition:codestar-connections:region:account:connection/connection-id" in message

    def test_error_names_field_and_arn(self):
        with pytest.raises(MalformedConnectionArnError) as exc_info:
            validate_connection_arn("not-an-arn")

        assert exc_info.value.context['field'] == 'connectionArn'
        assert exc_info.value.context['connection_arn'] == 'not-an-arn'
