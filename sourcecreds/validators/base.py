"""
Base Credential Validator

Abstract base class for per-provider credential validators.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type
import structlog

from ..errors import MissingCredentialError, SourceCredentialError
from ..loggingx import log_validation_failure, log_validation_success
from ..records import ServerType, SourceCredentialRecord
from ..secret import SecretValue


class CredentialValidator(ABC):
    """Abstract base class for credential validators."""
    
    # Validator metadata
    provider: str = "base"
    description: str = "Base credential validator"
    server_type: Optional[ServerType] = None
    input_class: Optional[Type] = None
    
    # Boundary field name -> input attribute name
    fields: Dict[str, str] = {}
    secret_fields: List[str] = []
    required_fields: List[str] = []
    
    def __init__(self):
        self.logger = structlog.get_logger(f"{__name__}.{self.__class__.__name__}")
    
    def validate(self, credentials: Any) -> SourceCredentialRecord:
        """
        Validate provider input and build the normalized record.
        
        Args:
            credentials: Instance of this validator's input_class
            
        Returns:
            Immutable SourceCredentialRecord
            
        Raises:
            CredentialValidationError: If the input is rejected
        """
        if self.input_class is not None and not isinstance(credentials, self.input_class):
            raise TypeError(
                f"{self.__class__.__name__} expects {self.input_class.__name__}, "
                f"got {type(credentials).__name__}"
            )
        
        try:
            record = self._build_record(credentials)
        except SourceCredentialError as e:
            log_validation_failure(self.provider, e, logger=self.logger)
            raise
        
        log_validation_success(self.provider, record.describe(), logger=self.logger)
        return record
    
    @abstractmethod
    def _build_record(self, credentials: Any) -> SourceCredentialRecord:
        """Run provider checks and map the input to a record."""
        pass
    
    def _require_secret(self, value: Optional[SecretValue], field: str) -> str:
        """Unwrap a required secret field, rejecting one that was left unset."""
        if value is None:
            raise MissingCredentialError(
                f"{field} must be provided",
                provider=self.provider,
                field=field
            )
        return self._unwrap_secret(value, field)
    
    def _unwrap_secret(self, value: SecretValue, field: str) -> str:
        """Return the raw text of a secret field, rejecting unwrapped strings."""
        if not isinstance(value, SecretValue):
            raise TypeError(
                f"{self.__class__.__name__} expects {field} as SecretValue, "
                f"got {type(value).__name__}"
            )
        return value.unsafe_unwrap()
