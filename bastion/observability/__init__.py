"""
Observability module.

Provides logging configuration for the port-forward helper.
"""

from bastion.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
