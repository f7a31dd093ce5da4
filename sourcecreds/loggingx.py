"""
Structured Logging Setup

Configures structured logging with proper formatting and output handling.
"""

import sys
import logging
import structlog
from typing import Optional, Dict, Any
from pathlib import Path


def setup_logging(level: str = "INFO", verbose: bool = False, 
                 log_file: Optional[str] = None) -> None:
    """
    Setup structured logging for credential validation.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        verbose: Enable human readable console output
        log_file: Optional file path for logging output
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper())
    )
    
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    
    if verbose:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())
    
    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        
        logging.getLogger().addHandler(file_handler)


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structured logger instance.
    
    Args:
        name: Logger name (usually __name__)
    
    Returns:
        Configured structured logger
    """
    return structlog.get_logger(name)


def log_validation_success(provider: str, record: Dict[str, Any],
                           logger: Optional[structlog.BoundLogger] = None) -> None:
    """
    Log a successful validation.
    
    Args:
        provider: Provider key the input was validated for
        record: Masked record description (never the raw record)
        logger: Optional logger instance
    """
    if logger is None:
        logger = get_logger(__name__)
    
    logger.info("Credential validated",
               provider=provider,
               server_type=record.get('serverType'),
               auth_type=record.get('authType'))


def log_validation_failure(provider: str, error: Exception,
                           logger: Optional[structlog.BoundLogger] = None) -> None:
    """Log a rejected credential input."""
    if logger is None:
        logger = get_logger(__name__)
    
    logger.warning("Credential validation failed",
                  provider=provider,
                  error_type=error.__class__.__name__,
                  error=getattr(error, 'message', str(error)))
