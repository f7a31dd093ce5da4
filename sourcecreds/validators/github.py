"""
GitHub Credential Validator

Accepts either a personal access token or a CodeConnections connection ARN.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .base import CredentialValidator
from ..errors import (
    ConflictingCredentialsError,
    MalformedConnectionArnError,
    MissingCredentialError,
)
from ..records import AuthType, ServerType, SourceCredentialRecord
from ..secret import SecretValue

# Legacy codestar-connections and current codeconnections service names
CONNECTION_ARN_PATTERN = re.compile(
    r'^arn:[^:]+:(codestar-connections|codeconnections):[^:]+:[^:]+:connection/[a-zA-Z0-9-]+$'
)

MISSING_MESSAGE = "Either accessToken or connectionArn must be provided"
CONFLICT_MESSAGE = (
    "Cannot provide both accessToken and connectionArn. "
    "Use either accessToken for personal access token authentication "
    "or connectionArn for CodeConnections authentication"
)
MALFORMED_ARN_MESSAGE = (
    "Invalid connectionArn format. Expected format: "
    "arn:partition:codeconnections:region:account:connection/connection-id "
    "or arn:partition:codestar-connections:region:account:connection/connection-id"
)


@dataclass(frozen=True)
class GitHubCredentialsInput:
    """Exactly one of access_token and connection_arn must be set."""
    
    access_token: Optional[SecretValue] = None
    connection_arn: Optional[str] = None


def validate_connection_arn(connection_arn: str) -> str:
    """
    Check a connection ARN against the accepted formats.
    
    Partition, region and account are only required to be non-empty and
    colon-free; they are not checked against real AWS values.
    
    Args:
        connection_arn: ARN of a CodeConnections or CodeStar connection
        
    Returns:
        The ARN, unchanged
        
    Raises:
        MalformedConnectionArnError: If the ARN does not match
    """
    if not isinstance(connection_arn, str) or not CONNECTION_ARN_PATTERN.fullmatch(connection_arn):
        raise MalformedConnectionArnError(
            MALFORMED_ARN_MESSAGE,
            connection_arn=connection_arn,
            provider=GitHubCredentialValidator.provider
        )
    return connection_arn


class GitHubCredentialValidator(CredentialValidator):
    """Validates GitHub credentials given as a token or a connection ARN."""
    
    provider = "github"
    description = "GitHub personal access token or CodeConnections connection"
    server_type = ServerType.GITHUB
    input_class = GitHubCredentialsInput
    
    fields = {
        'accessToken': 'access_token',
        'connectionArn': 'connection_arn',
    }
    secret_fields = ['accessToken']
    required_fields = []
    
    def _build_record(self, credentials: GitHubCredentialsInput) -> SourceCredentialRecord:
        has_access_token = credentials.access_token is not None
        has_connection_arn = credentials.connection_arn is not None
        
        if not has_access_token and not has_connection_arn:
            raise MissingCredentialError(MISSING_MESSAGE, provider=self.provider)
        
        if has_access_token and has_connection_arn:
            raise ConflictingCredentialsError(CONFLICT_MESSAGE, provider=self.provider)
        
        if has_connection_arn:
            return SourceCredentialRecord(
                server_type=ServerType.GITHUB,
                auth_type=AuthType.CODECONNECTIONS,
                token=validate_connection_arn(credentials.connection_arn),
            )
        
        return SourceCredentialRecord(
            server_type=ServerType.GITHUB,
            auth_type=AuthType.PERSONAL_ACCESS_TOKEN,
            token=self._unwrap_secret(credentials.access_token, 'accessToken'),
        )


def validate_github(access_token: Optional[SecretValue] = None,
                    connection_arn: Optional[str] = None) -> SourceCredentialRecord:
    """Shortcut for GitHubCredentialValidator().validate(...)."""
    return GitHubCredentialValidator().validate(
        GitHubCredentialsInput(access_token=access_token, connection_arn=connection_arn)
    )
