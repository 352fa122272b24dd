"""
Configuration management package for dirlist.

This package provides configuration parsing, validation, and management
functionality for dirlist.
"""

from .parser import (
    ConfigParser,
    ConfigParseResult,
    ConfigurationError,
    load_config,
    create_config_template
)

__all__ = [
    'ConfigParser',
    'ConfigParseResult',
    'ConfigurationError',
    'load_config',
    'create_config_template'
]
