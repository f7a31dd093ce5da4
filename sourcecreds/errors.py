"""
Custom Exceptions

Defines the error taxonomy raised while validating source credentials.
"""

from typing import Dict, Any, Optional


class SourceCredentialError(Exception):
    """Base exception for source credential errors."""
    
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
    
    def __str__(self):
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (Context: {context_str})"
        return self.message


class CredentialValidationError(SourceCredentialError):
    """Exception raised when credential input fails validation."""
    
    def __init__(self, message: str, provider: Optional[str] = None, 
                 field: Optional[str] = None, **kwargs):
        context = kwargs.copy()
        if provider:
            context['provider'] = provider
        if field:
            context['field'] = field
        
        super().__init__(message, context)


class MissingCredentialError(CredentialValidationError):
    """No authentication mechanism was supplied where one is required."""


class ConflictingCredentialsError(CredentialValidationError):
    """More than one mutually exclusive authentication mechanism was supplied."""


class MalformedConnectionArnError(CredentialValidationError):
    """A connection ARN was supplied but does not have the required shape."""
    
    def __init__(self, message: str, connection_arn: Optional[str] = None, **kwargs):
        if connection_arn is not None:
            kwargs['connection_arn'] = connection_arn
        super().__init__(message, field='connectionArn', **kwargs)


class InconsistentRecordError(CredentialValidationError):
    """A record's token/username fields do not agree with its auth type."""
    
    def __init__(self, message: str, auth_type: Optional[str] = None, **kwargs):
        if auth_type:
            kwargs['auth_type'] = auth_type
        super().__init__(message, **kwargs)


class ConfigurationError(SourceCredentialError):
    """Exception raised when configuration is invalid."""
    
    def __init__(self, message: str, config_file: Optional[str] = None, 
                 config_path: Optional[str] = None, **kwargs):
        context = kwargs.copy()
        if config_file:
            context['config_file'] = config_file
        if config_path:
            context['config_path'] = config_path
        
        super().__init__(message, context)


class UnknownProviderError(SourceCredentialError):
    """Exception raised when no validator is registered for a provider."""
    
    def __init__(self, message: str, provider: Optional[str] = None, **kwargs):
        context = kwargs.copy()
        if provider:
            context['provider'] = provider
        
        super().__init__(message, context)


def format_error_context(error: Exception) -> Dict[str, Any]:
    """
    Format error context for logging or reporting.
    
    Args:
        error: Exception instance
    
    Returns:
        Dictionary with error context information
    """
    if isinstance(error, SourceCredentialError):
        return {
            'error_type': error.__class__.__name__,
            'message': error.message,
            'context': error.context
        }
    else:
        return {
            'error_type': error.__class__.__name__,
            'message': str(error),
            'context': {}
        }
