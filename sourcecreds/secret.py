"""
Secret Values

Opaque holder for sensitive text such as access tokens and passwords.
"""

import os
from typing import Optional

from .errors import ConfigurationError

MASK = '***MASKED***'


class SecretValue:
    """
    Wraps a sensitive string so it is never printed, logged or serialized.
    
    The raw value is only available through ``unsafe_unwrap()``. Every other
    way of turning the object into text renders the mask instead.
    """
    
    __slots__ = ('_value', 'source')
    
    def __init__(self, value: str, source: Optional[str] = None):
        if not isinstance(value, str):
            raise TypeError(f"SecretValue expects str, got {type(value).__name__}")
        self._value = value
        self.source = source
    
    @classmethod
    def unsafe_plain_text(cls, value: str) -> "SecretValue":
        """Wrap a literal value. The value will be visible in whatever source it came from."""
        return cls(value, source='plain_text')
    
    @classmethod
    def from_env(cls, var_name: str) -> "SecretValue":
        """
        Wrap the value of an environment variable.
        
        Raises:
            ConfigurationError: If the variable is not set
        """
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigurationError(
                f"Environment variable '{var_name}' is not set",
                env_var=var_name
            )
        return cls(value, source=f"env:{var_name}")
    
    def unsafe_unwrap(self) -> str:
        """Return the raw secret text."""
        return self._value
    
    def __repr__(self):
        return f"SecretValue({MASK})"
    
    def __str__(self):
        return MASK
    
    def __format__(self, format_spec):
        return format(MASK, format_spec)
    
    def __eq__(self, other):
        if not isinstance(other, SecretValue):
            return NotImplemented
        return self._value == other._value
    
    def __hash__(self):
        return hash((SecretValue, self._value))
    
    def __reduce__(self):
        raise TypeError("SecretValue cannot be pickled")
