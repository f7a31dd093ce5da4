"""
Validators Package

Contains one credential validator per source provider.
"""

from .base import CredentialValidator
from .github import (
    GitHubCredentialValidator,
    GitHubCredentialsInput,
    validate_connection_arn,
    validate_github,
)
from .github_enterprise import (
    GitHubEnterpriseCredentialValidator,
    GitHubEnterpriseCredentialsInput,
    validate_github_enterprise,
)
from .bitbucket import (
    BitBucketCredentialValidator,
    BitBucketCredentialsInput,
    validate_bitbucket,
)

__all__ = [
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
]
