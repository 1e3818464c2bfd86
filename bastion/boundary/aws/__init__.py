"""
AWS boundary clients.
"""

from bastion.boundary.aws.ecs_client import (
    EcsTaskLocator,
    build_ssm_target,
    task_id_from_arn,
)

__all__ = ["EcsTaskLocator", "build_ssm_target", "task_id_from_arn"]
