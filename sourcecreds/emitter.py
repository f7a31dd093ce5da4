"""
Resource Emitters

Turn validated source credential records into provisioning resources.
"""

import copy
import json
import re
import yaml
import structlog
from abc import ABC, abstractmethod
from typing import Dict, Any, List

from .errors import ConfigurationError
from .records import SourceCredentialRecord

RESOURCE_TYPE = "AWS::CodeBuild::SourceCredential"
LOGICAL_ID_PATTERN = re.compile(r'^[A-Za-z0-9]+$')

# Record property -> template property
PROPERTY_NAMES = {
    'serverType': 'ServerType',
    'authType': 'AuthType',
    'token': 'Token',
    'username': 'Username',
}


class ResourceEmitter(ABC):
    """Abstract base class for record consumers."""
    
    def __init__(self):
        self.logger = structlog.get_logger(f"{__name__}.{self.__class__.__name__}")
    
    @abstractmethod
    def emit(self, logical_id: str, record: SourceCredentialRecord) -> None:
        """
        Accept one normalized record.
        
        Args:
            logical_id: Identifier for the resource within its template
            record: Validated source credential record
        """
        pass


class TemplateEmitter(ResourceEmitter):
    """
    Collects records into a CloudFormation-shaped template.
    
    More than one record for the same server type is accepted here. The
    provisioning service enforces one credential per server type per region.
    """
    
    def __init__(self, description: str = "Source credentials"):
        super().__init__()
        self.description = description
        self._resources: Dict[str, Dict[str, Any]] = {}
    
    def emit(self, logical_id: str, record: SourceCredentialRecord) -> None:
        if not LOGICAL_ID_PATTERN.match(logical_id):
            raise ConfigurationError(
                f"Logical id '{logical_id}' must be alphanumeric",
                logical_id=logical_id
            )
        
        if logical_id in self._resources:
            raise ConfigurationError(
                f"Duplicate logical id '{logical_id}'",
                logical_id=logical_id
            )
        
        self._resources[logical_id] = {
            'Type': RESOURCE_TYPE,
            'Properties': {
                PROPERTY_NAMES[key]: value for key, value in record.to_properties().items()
            }
        }
        
        self.logger.info("Emitted source credential resource",
                        logical_id=logical_id,
                        **record.describe())
    
    @property
    def logical_ids(self) -> List[str]:
        return list(self._resources)
    
    def template(self) -> Dict[str, Any]:
        return {
            'AWSTemplateFormatVersion': '2010-09-09',
            'Description': self.description,
            'Resources': copy.deepcopy(self._resources),
        }
    
    def render(self, output_format: str = "yaml") -> str:
        """
        Render the collected template.
        
        Args:
            output_format: 'yaml' or 'json'
            
        Returns:
            Template text
        """
        template = self.template()
        
        if output_format == "json":
            return json.dumps(template, indent=2) + "\n"
        elif output_format == "yaml":
            return yaml.safe_dump(template, sort_keys=False, default_flow_style=False)
        
        raise ConfigurationError(
            f"Unsupported output format: {output_format}",
            output_format=output_format
        )
