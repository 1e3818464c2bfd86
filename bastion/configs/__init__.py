"""
Configuration management module.

Provides type-safe configuration using Pydantic Settings.
"""

from bastion.configs.settings import PortForwardSettings, get_settings

__all__ = ["PortForwardSettings", "get_settings"]
