"""
Configuration

Loads credential definitions from YAML files and runtime settings from the
environment.
"""

import os
import re
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import ConfigurationError
from .registry import ValidatorRegistry

ENV_VAR_PATTERN = re.compile(r'\$\{([^}]+)\}')

RESERVED_KEYS = ('name', 'provider')


@dataclass
class Settings:
    """Runtime settings for logging."""
    
    log_level: str = "INFO"
    verbose: bool = False
    log_file: Optional[str] = None
    
    @classmethod
    def from_env(cls) -> "Settings":
        verbose = os.environ.get('SOURCECREDS_VERBOSE', '').lower() in ('1', 'true', 'yes', 'on')
        return cls(
            log_level=os.environ.get('SOURCECREDS_LOG_LEVEL', 'INFO').upper(),
            verbose=verbose,
            log_file=os.environ.get('SOURCECREDS_LOG_FILE') or None,
        )


@dataclass
class CredentialSpec:
    """One credential entry from a credentials file, before validation."""
    
    name: str
    provider: str
    fields: Dict[str, Any] = field(default_factory=dict, repr=False)


def substitute_environment_variables(value: str) -> str:
    """
    Substitute environment variables in a string value.
    
    Args:
        value: String that may contain ${VAR_NAME} placeholders
        
    Returns:
        String with set variables substituted, unset ones left as written
    """
    if not isinstance(value, str):
        return value
    
    def replace_var(match):
        var_name = match.group(1)
        return os.environ.get(var_name, match.group(0))
    
    return ENV_VAR_PATTERN.sub(replace_var, value)


def substitute_env_vars_in_config(config: Any) -> Any:
    """Recursively substitute environment variables in configuration."""
    if isinstance(config, dict):
        return {k: substitute_env_vars_in_config(v) for k, v in config.items()}
    elif isinstance(config, list):
        return [substitute_env_vars_in_config(item) for item in config]
    elif isinstance(config, str):
        return substitute_environment_variables(config)
    else:
        return config


def parse_credentials(config: Any, source: str = "<memory>",
                      registry: Optional[ValidatorRegistry] = None) -> List[CredentialSpec]:
    """
    Turn a parsed credentials document into CredentialSpec entries.
    
    Entries for the same provider are all kept; the provisioning service is
    the one that rejects a second credential per server type.
    
    Raises:
        ConfigurationError: If the document does not have the expected shape,
            or a secret field still holds an unresolved ${VAR} placeholder
    """
    if not isinstance(config, dict) or 'credentials' not in config:
        raise ConfigurationError(
            "Credentials file must be a mapping with a 'credentials' list",
            config_file=source
        )
    
    entries = config['credentials']
    if not isinstance(entries, list):
        raise ConfigurationError(
            "'credentials' must be a list",
            config_file=source,
            config_path="credentials"
        )
    
    registry = registry or ValidatorRegistry()
    specs = []
    for index, entry in enumerate(entries):
        path = f"credentials[{index}]"
        
        if not isinstance(entry, dict):
            raise ConfigurationError(
                "Credential entry must be a mapping",
                config_file=source,
                config_path=path
            )
        
        provider = entry.get('provider')
        if not provider:
            raise ConfigurationError(
                "Credential entry is missing 'provider'",
                config_file=source,
                config_path=path
            )
        
        name = str(entry.get('name') or f"{provider}{index}")
        fields = {k: v for k, v in entry.items() if k not in RESERVED_KEYS}
        _check_unresolved_secrets(registry, str(provider), fields, source, path)
        specs.append(CredentialSpec(name=name, provider=str(provider), fields=fields))
    
    return specs


def _check_unresolved_secrets(registry: ValidatorRegistry, provider: str, fields: Dict[str, Any],
                              source: str, path: str) -> None:
    """Reject secret fields whose environment variable was not set."""
    # Unknown providers are reported by the registry at validation time
    if not registry.has_provider(provider):
        return
    
    for key in registry.secret_field_names(provider):
        value = fields.get(key)
        if not isinstance(value, str):
            continue
        match = ENV_VAR_PATTERN.search(value)
        if match:
            raise ConfigurationError(
                f"Secret field '{key}' references unset environment variable '{match.group(1)}'",
                config_file=source,
                config_path=f"{path}.{key}",
                env_var=match.group(1)
            )


def load_credentials_file(path: Union[str, Path],
                          registry: Optional[ValidatorRegistry] = None) -> List[CredentialSpec]:
    """
    Load credential definitions from a YAML file.
    
    Args:
        path: Path to the credentials file
        
    Returns:
        List of CredentialSpec entries in file order
        
    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    config_path = Path(path)
    
    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read credentials file: {e}", config_file=str(config_path))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in credentials file: {e}", config_file=str(config_path))
    
    return parse_credentials(substitute_env_vars_in_config(config), source=str(config_path),
                             registry=registry)
