"""
Source Credential Records

The normalized record every validator produces and the emitter consumes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Optional

from .errors import InconsistentRecordError
from .secret import MASK


class ServerType(str, Enum):
    """Source provider the credential is used against."""
    
    GITHUB = "GITHUB"
    GITHUB_ENTERPRISE = "GITHUB_ENTERPRISE"
    BITBUCKET = "BITBUCKET"


class AuthType(str, Enum):
    """Authentication scheme carried by the record."""
    
    PERSONAL_ACCESS_TOKEN = "PERSONAL_ACCESS_TOKEN"
    CODECONNECTIONS = "CODECONNECTIONS"
    BASIC_AUTH = "BASIC_AUTH"


@dataclass(frozen=True, repr=False)
class SourceCredentialRecord:
    """Normalized source credential, immutable once built."""
    
    server_type: ServerType
    auth_type: AuthType
    token: Optional[str] = None
    username: Optional[str] = None
    
    def __post_init__(self):
        # Accept plain strings for the enums
        object.__setattr__(self, 'server_type', ServerType(self.server_type))
        object.__setattr__(self, 'auth_type', AuthType(self.auth_type))
        
        if self.token is None:
            raise InconsistentRecordError(
                f"{self.auth_type.value} records require a token",
                auth_type=self.auth_type.value
            )
        
        if self.auth_type is AuthType.BASIC_AUTH:
            if self.username is None:
                raise InconsistentRecordError(
                    "BASIC_AUTH records require a username",
                    auth_type=self.auth_type.value
                )
        elif self.username is not None:
            raise InconsistentRecordError(
                f"{self.auth_type.value} records must not carry a username",
                auth_type=self.auth_type.value
            )
    
    def to_properties(self) -> Dict[str, Any]:
        """
        Build the boundary representation handed to the resource emitter.
        
        Returns:
            Dictionary with serverType, authType and, when set, token and username
        """
        properties = {
            'serverType': self.server_type.value,
            'authType': self.auth_type.value,
        }
        
        if self.token is not None:
            properties['token'] = self.token
        if self.username is not None:
            properties['username'] = self.username
        
        return properties
    
    def describe(self) -> Dict[str, Any]:
        """Same shape as to_properties() with secret fields masked."""
        description = self.to_properties()
        
        # Connection ARNs are references, not secrets
        if 'token' in description and self.auth_type is not AuthType.CODECONNECTIONS:
            description['token'] = MASK
        if 'username' in description:
            description['username'] = MASK
        
        return description
    
    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in self.describe().items())
        return f"SourceCredentialRecord({fields})"
