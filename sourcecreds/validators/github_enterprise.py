"""
GitHub Enterprise Credential Validator
"""

from dataclasses import dataclass

from .base import CredentialValidator
from ..records import AuthType, ServerType, SourceCredentialRecord
from ..secret import SecretValue


@dataclass(frozen=True)
class GitHubEnterpriseCredentialsInput:
    access_token: SecretValue


class GitHubEnterpriseCredentialValidator(CredentialValidator):
    """Validates a GitHub Enterprise personal access token."""
    
    provider = "github_enterprise"
    description = "GitHub Enterprise personal access token"
    server_type = ServerType.GITHUB_ENTERPRISE
    input_class = GitHubEnterpriseCredentialsInput
    
    fields = {'accessToken': 'access_token'}
    secret_fields = ['accessToken']
    required_fields = ['accessToken']
    
    def _build_record(self, credentials: GitHubEnterpriseCredentialsInput) -> SourceCredentialRecord:
        token = self._require_secret(credentials.access_token, 'accessToken')
        
        return SourceCredentialRecord(
            server_type=ServerType.GITHUB_ENTERPRISE,
            auth_type=AuthType.PERSONAL_ACCESS_TOKEN,
            token=token,
        )


def validate_github_enterprise(access_token: SecretValue) -> SourceCredentialRecord:
    return GitHubEnterpriseCredentialValidator().validate(
        GitHubEnterpriseCredentialsInput(access_token=access_token)
    )
