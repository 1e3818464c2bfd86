"""
IAM roles component for the bastion task.

Creates:
- Task role: assumed by the running container. Carries the SSM core policy
  and the ssmmessages channel actions ECS Exec and port forwarding need.
- Execution role: assumed by the ECS agent to pull the image and ship logs.
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.constants import ECS_EXEC_ACTIONS, ECS_TASKS_PRINCIPAL, MANAGED_POLICIES
from IAC.utils.tags import create_tags


def assume_role_policy(service: str) -> str:
    """Trust policy allowing an AWS service principal to assume a role."""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Principal": {"Service": service},
            "Action": "sts:AssumeRole",
        }],
    })


def ecs_exec_policy() -> str:
    """Inline policy for the SSM message channels used by ECS Exec."""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [
            {
                "Effect": "Allow",
                "Action": ECS_EXEC_ACTIONS,
                "Resource": ["*"],
            },
        ],
    })


@dataclass
class IamRoleOutputs:
    """Output values from IAM roles component."""
    task_role_arn: pulumi.Output[str]
    execution_role_arn: pulumi.Output[str]


class IamRolesComponent(pulumi.ComponentResource):
    """
    IAM roles for the bastion Fargate task.

    Both roles trust ecs-tasks.amazonaws.com only.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:IamRoles", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # Task role
        self.task_role = aws.iam.Role(
            f"{name}-task-role",
            assume_role_policy=assume_role_policy(ECS_TASKS_PRINCIPAL),
            tags=create_tags(environment, f"{name}-task-role"),
            opts=child_opts,
        )

        aws.iam.RolePolicyAttachment(
            f"{name}-task-ssm-core",
            role=self.task_role.name,
            policy_arn=MANAGED_POLICIES["ssm_core"],
            opts=child_opts,
        )

        self.exec_policy = aws.iam.RolePolicy(
            f"{name}-task-ecs-exec",
            name="ECSExecPolicy",
            role=self.task_role.id,
            policy=ecs_exec_policy(),
            opts=child_opts,
        )

        # Execution role
        self.execution_role = aws.iam.Role(
            f"{name}-execution-role",
            assume_role_policy=assume_role_policy(ECS_TASKS_PRINCIPAL),
            tags=create_tags(environment, f"{name}-execution-role"),
            opts=child_opts,
        )

        aws.iam.RolePolicyAttachment(
            f"{name}-execution-policy",
            role=self.execution_role.name,
            policy_arn=MANAGED_POLICIES["task_execution"],
            opts=child_opts,
        )

        self.register_outputs({
            "task_role_arn": self.task_role.arn,
            "execution_role_arn": self.execution_role.arn,
        })

    def get_outputs(self) -> IamRoleOutputs:
        """Get IAM role output values."""
        return IamRoleOutputs(
            task_role_arn=self.task_role.arn,
            execution_role_arn=self.execution_role.arn,
        )
