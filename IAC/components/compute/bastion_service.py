"""
Bastion Fargate Service Component.

The bastion is a long-running Amazon Linux task whose only job is to run the
SSM agent. Operators never connect to it directly:

1. `aws ssm start-session --target ecs:<cluster>_<task_id>_<runtime_id>` asks
   Systems Manager to open a session to the container.
2. The agent inside the task dials out over ssmmessages (task role grants it)
   and relays TCP to the remote host, e.g. the RDS endpoint.
3. Because enable_execute_command=True, ECS injects the SSM agent binaries and
   exposes the container runtime id needed to build the target.

Placement: private subnets, no public IP, bastion security group.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.base import EnvironmentConfig
from IAC.configs.constants import (
    BASTION_COMMAND,
    BASTION_CONTAINER_NAME,
    BASTION_LOG_GROUP,
    BASTION_LOG_STREAM_PREFIX,
)
from IAC.utils.tags import create_tags


def container_definitions(
    image: str,
    log_group_name: pulumi.Input[str],
    region: str,
) -> pulumi.Output[str]:
    """
    Render the bastion container definition list as JSON.

    Args:
        image: Container image reference
        log_group_name: CloudWatch log group for the awslogs driver
        region: AWS region of the log group

    Returns:
        Output resolving to the containerDefinitions JSON document
    """
    return pulumi.Output.json_dumps([
        {
            "name": BASTION_CONTAINER_NAME,
            "image": image,
            "essential": True,
            "command": BASTION_COMMAND,
            "logConfiguration": {
                "logDriver": "awslogs",
                "options": {
                    "awslogs-group": log_group_name,
                    "awslogs-region": region,
                    "awslogs-stream-prefix": BASTION_LOG_STREAM_PREFIX,
                },
            },
        },
    ])


@dataclass
class BastionServiceOutputs:
    """Output values from bastion service component."""
    service_name: pulumi.Output[str]
    task_definition_arn: pulumi.Output[str]
    log_group_name: pulumi.Output[str]


class BastionServiceComponent(pulumi.ComponentResource):
    """
    Fargate service running the SSM-enabled bastion container.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: EnvironmentConfig,
        region: str,
        cluster_arn: pulumi.Input[str],
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        task_role_arn: pulumi.Input[str],
        execution_role_arn: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:BastionService", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # CloudWatch Log Group (removed with the stack)
        self.log_group = aws.cloudwatch.LogGroup(
            f"{name}-logs",
            name=BASTION_LOG_GROUP,
            retention_in_days=config.log_retention_days,
            tags=create_tags(environment, f"{name}-logs"),
            opts=child_opts,
        )

        self.task_definition = aws.ecs.TaskDefinition(
            f"{name}-task",
            family=f"{name}-task",
            cpu=str(config.task_cpu),
            memory=str(config.task_memory),
            network_mode="awsvpc",
            requires_compatibilities=["FARGATE"],
            task_role_arn=task_role_arn,
            execution_role_arn=execution_role_arn,
            container_definitions=container_definitions(
                config.bastion_image, self.log_group.name, region
            ),
            tags=create_tags(environment, f"{name}-task"),
            opts=child_opts,
        )

        self.service = aws.ecs.Service(
            f"{name}-service",
            name=config.service_name,
            cluster=cluster_arn,
            task_definition=self.task_definition.arn,
            desired_count=config.desired_count,
            launch_type="FARGATE",
            enable_execute_command=True,
            network_configuration=aws.ecs.ServiceNetworkConfigurationArgs(
                subnets=subnet_ids,
                security_groups=[security_group_id],
                assign_public_ip=False,
            ),
            propagate_tags="SERVICE",
            tags=create_tags(environment, config.service_name),
            opts=child_opts,
        )

        self.register_outputs({
            "service_name": self.service.name,
            "task_definition_arn": self.task_definition.arn,
            "log_group_name": self.log_group.name,
        })

    def get_outputs(self) -> BastionServiceOutputs:
        """Get bastion service output values."""
        return BastionServiceOutputs(
            service_name=self.service.name,
            task_definition_arn=self.task_definition.arn,
            log_group_name=self.log_group.name,
        )
