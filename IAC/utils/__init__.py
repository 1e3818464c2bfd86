"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, tag factories, output and command helpers.
"""

from IAC.utils.naming import ResourceNamer
from IAC.utils.tags import create_tags, merge_tags
from IAC.utils.outputs import write_outputs_to_env
from IAC.utils.commands import port_forward_command

__all__ = [
    "ResourceNamer",
    "create_tags",
    "merge_tags",
    "write_outputs_to_env",
    "port_forward_command",
]
