"""
Infrastructure constants for the ECS Fargate bastion.

Contains CIDR blocks, ports, IAM policy names and container defaults.
"""

from typing import Final

# VPC Configuration
VPC_CIDR: Final[str] = "10.0.0.0/16"

# Subnet CIDR blocks per tier, indexed by availability zone
SUBNET_CIDRS: Final[dict[str, list[str]]] = {
    "public": ["10.0.0.0/24", "10.0.1.0/24", "10.0.2.0/24"],
    "private": ["10.0.3.0/24", "10.0.4.0/24", "10.0.5.0/24"],   # Bastion tasks (egress via NAT)
    "database": ["10.0.6.0/24", "10.0.7.0/24", "10.0.8.0/24"],  # RDS (isolated)
}

# Port configurations
PORTS: Final[dict[str, int]] = {
    "mysql": 3306,
}

# Systems Manager document used for remote host port forwarding
SSM_PORT_FORWARD_DOCUMENT: Final[str] = "AWS-StartPortForwardingSessionToRemoteHost"

# Channels the SSM agent inside the task opens for ECS Exec
ECS_EXEC_ACTIONS: Final[list[str]] = [
    "ssmmessages:CreateControlChannel",
    "ssmmessages:CreateDataChannel",
    "ssmmessages:OpenControlChannel",
    "ssmmessages:OpenDataChannel",
]

MANAGED_POLICIES: Final[dict[str, str]] = {
    "ssm_core": "arn:aws:iam::aws:policy/AmazonSSMManagedInstanceCore",
    "task_execution": "arn:aws:iam::aws:policy/service-role/AmazonECSTaskExecutionRolePolicy",
}

ECS_TASKS_PRINCIPAL: Final[str] = "ecs-tasks.amazonaws.com"

# Bastion container
BASTION_CONTAINER_NAME: Final[str] = "BastionContainer"
BASTION_COMMAND: Final[list[str]] = [
    "/bin/bash",
    "-c",
    "yum update -y && yum install -y amazon-ssm-agent && /usr/bin/amazon-ssm-agent & while true; do sleep 30; done",
]
BASTION_LOG_GROUP: Final[str] = "/ecs/bastion-task"
BASTION_LOG_STREAM_PREFIX: Final[str] = "bastion"

# RDS MySQL
MYSQL_ENGINE_VERSION: Final[str] = "8.0"

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": "ecs-fargate-bastion",
    "ManagedBy": "pulumi",
}
