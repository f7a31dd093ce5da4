"""
Source Credentials Package

Validates the credentials a build service uses to reach source providers
and normalizes them into a single source credential record.
"""

__version__ = "1.0.0"

from .errors import (
    SourceCredentialError,
    CredentialValidationError,
    MissingCredentialError,
    ConflictingCredentialsError,
    MalformedConnectionArnError,
    InconsistentRecordError,
    ConfigurationError,
    UnknownProviderError,
)
from .secret import SecretValue
from .records import AuthType, ServerType, SourceCredentialRecord
from .validators import (
    CredentialValidator,
    GitHubCredentialValidator,
    GitHubCredentialsInput,
    GitHubEnterpriseCredentialValidator,
    GitHubEnterpriseCredentialsInput,
    BitBucketCredentialValidator,
    BitBucketCredentialsInput,
    validate_connection_arn,
    validate_github,
    validate_github_enterprise,
    validate_bitbucket,
)
from .registry import ValidatorRegistry

__all__ = [
    "SourceCredentialError",
    "CredentialValidationError",
    "MissingCredentialError",
    "ConflictingCredentialsError",
    "MalformedConnectionArnError",
    "InconsistentRecordError",
    "ConfigurationError",
    "UnknownProviderError",
    "SecretValue",
    "AuthType",
    "ServerType",
    "SourceCredentialRecord",
    "CredentialValidator",
    "GitHubCredentialValidator",
    "GitHubCredentialsInput",
    "GitHubEnterpriseCredentialValidator",
    "GitHubEnterpriseCredentialsInput",
    "BitBucketCredentialValidator",
    "BitBucketCredentialsInput",
    "validate_connection_arn",
    "validate_github",
    "validate_github_enterprise",
    "validate_bitbucket",
    "ValidatorRegistry",
]
