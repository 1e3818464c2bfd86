"""
Compute components for ECS.

Components:
- EcsClusterComponent: ECS cluster with Fargate capacity providers
- BastionServiceComponent: Fargate service running the SSM bastion task
"""

from IAC.components.compute.ecs_cluster import EcsClusterComponent, EcsClusterOutputs
from IAC.components.compute.bastion_service import BastionServiceComponent, BastionServiceOutputs

__all__ = [
    "EcsClusterComponent",
    "EcsClusterOutputs",
    "BastionServiceComponent",
    "BastionServiceOutputs",
]
