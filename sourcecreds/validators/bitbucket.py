"""
BitBucket Credential Validator

Username and application password, sent as basic auth.
"""

from dataclasses import dataclass

from .base import CredentialValidator
from ..records import AuthType, ServerType, SourceCredentialRecord
from ..secret import SecretValue


@dataclass(frozen=True)
class BitBucketCredentialsInput:
    """Both fields are required. Their content is not checked."""
    
    username: SecretValue
    password: SecretValue


class BitBucketCredentialValidator(CredentialValidator):
    """Validates a BitBucket username and application password."""
    
    provider = "bitbucket"
    description = "BitBucket username and application password"
    server_type = ServerType.BITBUCKET
    input_class = BitBucketCredentialsInput
    
    fields = {
        'username': 'username',
        'password': 'password',
    }
    secret_fields = ['username', 'password']
    required_fields = ['username', 'password']
    
    def _build_record(self, credentials: BitBucketCredentialsInput) -> SourceCredentialRecord:
        username = self._require_secret(credentials.username, 'username')
        password = self._require_secret(credentials.password, 'password')
        
        return SourceCredentialRecord(
            server_type=ServerType.BITBUCKET,
            auth_type=AuthType.BASIC_AUTH,
            username=username,
            token=password,
        )


def validate_bitbucket(username: SecretValue, password: SecretValue) -> SourceCredentialRecord:
    return BitBucketCredentialValidator().validate(
        BitBucketCredentialsInput(username=username, password=password)
    )
