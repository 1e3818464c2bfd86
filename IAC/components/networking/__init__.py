"""
Networking components for VPC infrastructure.

Components:
- VpcComponent: VPC with public/private/database subnets, NAT gateway, route tables
- SecurityGroupsComponent: Security groups for the bastion and the database
"""

from IAC.components.networking.vpc import VpcComponent, VpcOutputs
from IAC.components.networking.security_groups import SecurityGroupsComponent, SecurityGroupOutputs

__all__ = [
    "VpcComponent",
    "VpcOutputs",
    "SecurityGroupsComponent",
    "SecurityGroupOutputs",
]
