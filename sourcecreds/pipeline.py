"""
Credential Registration

Validates credential specs and hands the resulting records to an emitter.
"""

import re
import structlog
from typing import Iterable, List, Optional, Tuple

from .config import CredentialSpec
from .emitter import ResourceEmitter
from .errors import ConfigurationError, SourceCredentialError
from .records import SourceCredentialRecord
from .registry import ValidatorRegistry

logger = structlog.get_logger(__name__)


def logical_id_for(name: str) -> str:
    """Build an alphanumeric logical id from a credential name."""
    parts = [part for part in re.split(r'[^A-Za-z0-9]+', name) if part]
    return ''.join(part[0].upper() + part[1:] for part in parts) or "SourceCredential"


def validate_specs(specs: Iterable[CredentialSpec],
                   registry: Optional[ValidatorRegistry] = None
                   ) -> List[Tuple[str, CredentialSpec, SourceCredentialRecord]]:
    """
    Validate every spec and assign its logical id, stopping at the first failure.
    
    Returns:
        (logical_id, spec, record) tuples in spec order
        
    Raises:
        ConfigurationError: If two credential names map to the same logical id
        SourceCredentialError: From the first spec that fails, with the
            credential name added to its context
    """
    registry = registry or ValidatorRegistry()
    validated = []
    seen = {}
    
    for spec in specs:
        logical_id = logical_id_for(spec.name)
        if logical_id in seen:
            raise ConfigurationError(
                f"Credentials '{seen[logical_id]}' and '{spec.name}' "
                f"both map to logical id '{logical_id}'",
                credential_name=spec.name,
                logical_id=logical_id
            )
        seen[logical_id] = spec.name
        
        try:
            record = registry.validate(spec.provider, spec.fields)
        except SourceCredentialError as e:
            e.context.setdefault('credential_name', spec.name)
            raise
        validated.append((logical_id, spec, record))
    
    return validated


def register_credentials(specs: Iterable[CredentialSpec], emitter: ResourceEmitter,
                         registry: Optional[ValidatorRegistry] = None) -> List[SourceCredentialRecord]:
    """
    Validate all specs, then emit one resource per record.
    
    Nothing is emitted unless every spec validates and every logical id is
    unique.
    
    Args:
        specs: Credential specs, usually from load_credentials_file()
        emitter: Consumer of the normalized records
        registry: Validator registry, discovered when not given
        
    Returns:
        Records in spec order
    """
    validated = validate_specs(specs, registry)
    
    for logical_id, _, record in validated:
        emitter.emit(logical_id, record)
    
    logger.info("Registered source credentials", count=len(validated))
    return [record for _, _, record in validated]
