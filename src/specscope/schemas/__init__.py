"""Pydantic configuration schemas for specscope.

This module provides strictly typed configuration models. All
configuration validation, coercion, and normalization happens at schema
validation time via Pydantic.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
CLIConfig : class
    Command-line operational overrides
"""

from specscope.schemas.resolve import resolve_config
from specscope.schemas.internal import InternalConfig
from specscope.schemas.param import ParamConfig
from specscope.schemas.user import UserConfig
from specscope.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'CLIConfig',
]
