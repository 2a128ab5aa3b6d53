"""Logging utilities for gei_archive modules."""

import logging

PACKAGE_LOGGERS = (
    'gei_archive',
    'gei_archive.api',
    'gei_archive.upload',
    'gei_archive.upload.single',
    'gei_archive.upload.chunked',
    'gei_archive.cli',
)


def get_logger(name: str) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.
    
    This ensures that loggers work with basicConfig() without needing
    explicit setup_logging() calls. The logger will:
    - Propagate to root logger (default behavior)
    - Only set a default level if root logger has no handlers
    
    Args:
        name: Logger name (typically one of PACKAGE_LOGGERS)
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    
    # basicConfig() not called yet
    root_logger = logging.getLogger()
    if not root_logger.handlers and logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)
    
    return logger


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configure logging for gei_archive modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    for logger_name in PACKAGE_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True
