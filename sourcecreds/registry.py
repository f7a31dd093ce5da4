"""
Validator Registry

Discovers credential validators and builds their inputs from plain mappings.
"""

import importlib
import inspect
import structlog
from typing import Dict, Type, Any, List, Mapping
from pathlib import Path

from .errors import ConfigurationError, UnknownProviderError
from .records import SourceCredentialRecord
from .secret import SecretValue
from .validators.base import CredentialValidator


class ValidatorRegistry:
    """Registry mapping provider keys to credential validators."""
    
    def __init__(self, discover: bool = True):
        self.logger = structlog.get_logger(__name__)
        self._validators: Dict[str, Type[CredentialValidator]] = {}
        self._validator_metadata: Dict[str, Dict[str, Any]] = {}
        
        if discover:
            self._discover_validators()
    
    def _discover_validators(self) -> None:
        """Import every module in the validators package and register its validators."""
        validators_dir = Path(__file__).parent / "validators"
        
        for validator_file in sorted(validators_dir.glob("*.py")):
            if validator_file.name in ["__init__.py", "base.py"]:
                continue
            
            module_name = f"{__package__}.validators.{validator_file.stem}"
            module = importlib.import_module(module_name)
            
            for name, obj in inspect.getmembers(module, inspect.isclass):
                if (issubclass(obj, CredentialValidator) and 
                    obj is not CredentialValidator and
                    obj.__module__ == module_name):
                    
                    self.register_validator(obj.provider, obj)
                    
                    self.logger.debug("Discovered validator", 
                                    provider=obj.provider, 
                                    module=module_name)
    
    def register_validator(self, provider: str, validator_class: Type[CredentialValidator]) -> None:
        """Register a validator class under a provider key."""
        if not (inspect.isclass(validator_class) and issubclass(validator_class, CredentialValidator)):
            raise ValueError(f"Validator class must inherit from CredentialValidator: {validator_class}")
        
        self._validators[provider] = validator_class
        
        self._validator_metadata[provider] = {
            'description': validator_class.description,
            'server_type': validator_class.server_type.value if validator_class.server_type else None,
            'fields': list(validator_class.fields),
            'secret_fields': list(validator_class.secret_fields),
            'required_fields': list(validator_class.required_fields),
            'class': validator_class
        }
    
    def get_validator(self, provider: str) -> Type[CredentialValidator]:
        """Get a validator class by provider key."""
        if provider not in self._validators:
            raise UnknownProviderError(
                f"Unknown provider: {provider}. "
                f"Available providers: {', '.join(sorted(self._validators))}",
                provider=provider
            )
        
        return self._validators[provider]
    
    def has_provider(self, provider: str) -> bool:
        return provider in self._validators
    
    def get_available_providers(self) -> List[str]:
        return sorted(self._validators)
    
    def list_providers(self) -> Dict[str, Dict[str, Any]]:
        """List all registered providers with their metadata."""
        return {
            provider: {
                key: value for key, value in metadata.items() if key != 'class'
            }
            for provider, metadata in sorted(self._validator_metadata.items())
        }
    
    def secret_field_names(self, provider: str) -> List[str]:
        """Secret field names for a provider, in boundary and snake_case form."""
        validator_class = self.get_validator(provider)
        names = []
        for boundary_name in validator_class.secret_fields:
            names.append(boundary_name)
            attribute = validator_class.fields[boundary_name]
            if attribute != boundary_name:
                names.append(attribute)
        return names
    
    def build_input(self, provider: str, fields: Mapping[str, Any]) -> Any:
        """
        Build a provider's typed input from a plain mapping.
        
        Keys may use the boundary names (accessToken) or snake_case
        (access_token). Secret fields given as strings are wrapped in
        SecretValue; fields that are absent or None stay None.
        
        Args:
            provider: Registered provider key
            fields: Field values keyed by name
            
        Returns:
            Instance of the validator's input class
            
        Raises:
            UnknownProviderError: If the provider is not registered
            ConfigurationError: If a field is not known for the provider
        """
        validator_class = self.get_validator(provider)
        
        by_name = {}
        for boundary_name, attribute in validator_class.fields.items():
            by_name[boundary_name] = (boundary_name, attribute)
            by_name[attribute] = (boundary_name, attribute)
        
        kwargs = {attribute: None for attribute in validator_class.fields.values()}
        for key, value in fields.items():
            if key not in by_name:
                raise ConfigurationError(
                    f"Unknown field '{key}' for provider {provider}. "
                    f"Expected one of: {', '.join(validator_class.fields)}",
                    provider=provider
                )
            
            boundary_name, attribute = by_name[key]
            if value is not None and boundary_name in validator_class.secret_fields:
                if not isinstance(value, SecretValue):
                    value = SecretValue(str(value), source=f"field:{boundary_name}")
            elif value is not None and not isinstance(value, str):
                value = str(value)
            kwargs[attribute] = value
        
        return validator_class.input_class(**kwargs)
    
    def validate(self, provider: str, fields: Mapping[str, Any]) -> SourceCredentialRecord:
        """Build the input for a provider and validate it."""
        credentials = self.build_input(provider, fields)
        return self.get_validator(provider)().validate(credentials)
