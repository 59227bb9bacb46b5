"""
Utility functions for the MCP Redmine integration.
This package provides various utility functions used throughout the codebase.
"""

from .env import is_env_extended_truthy, is_env_ssl_verify
from .io import is_read_only_mode
from .logging import log_config_param, mask_sensitive
from .tools import get_enabled_tools, should_include_tool

__all__ = [
    "get_enabled_tools",
    "is_env_extended_truthy",
    "is_env_ssl_verify",
    "is_read_only_mode",
    "log_config_param",
    "mask_sensitive",
    "should_include_tool",
]
