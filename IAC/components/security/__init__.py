"""
Security components for IAM.

Components:
- IamRolesComponent: Task and execution roles for the bastion task
"""

from IAC.components.security.iam_roles import IamRolesComponent, IamRoleOutputs

__all__ = [
    "IamRolesComponent",
    "IamRoleOutputs",
]
