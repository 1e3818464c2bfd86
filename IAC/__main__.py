"""
Pulumi program entry point for the ECS Fargate bastion.

Instantiates all component resources in dependency order:
1. Configuration
2. VPC -> Security Groups -> IAM Roles
3. ECS Cluster -> Bastion Service
4. RDS MySQL
5. Exports (including the SSM port-forward command template)
"""

import pulumi
import pulumi_aws as aws

from IAC.configs.constants import PORTS
from IAC.configs.environment import get_config
from IAC.utils.commands import port_forward_command
from IAC.utils.naming import ResourceNamer
from IAC.utils.outputs import write_outputs_to_env

# Networking
from IAC.components.networking.vpc import VpcComponent
from IAC.components.networking.security_groups import SecurityGroupsComponent

# Security
from IAC.components.security.iam_roles import IamRolesComponent

# Compute
from IAC.components.compute.ecs_cluster import EcsClusterComponent
from IAC.components.compute.bastion_service import BastionServiceComponent

# Storage
from IAC.components.storage.rds_mysql import RdsMysqlComponent


def main() -> None:
    """Deploy the bastion infrastructure."""
    config = get_config()
    namer = ResourceNamer(project="bastion", environment=config.environment)
    base_name = namer.name("")

    aws_region = aws.get_region().id
    zones = aws.get_availability_zones(state="available").names[: config.max_azs]

    # --- Layer 1: Networking Foundation ---
    vpc = VpcComponent(
        name=base_name,
        environment=config.environment,
        availability_zones=zones,
        nat_gateways=config.nat_gateways,
    )
    vpc_outputs = vpc.get_outputs()

    security_groups = SecurityGroupsComponent(
        name=base_name,
        environment=config.environment,
        vpc_id=vpc_outputs.vpc_id,
    )
    sg_outputs = security_groups.get_outputs()

    # --- Layer 2: IAM Roles ---
    iam_roles = IamRolesComponent(
        name=base_name,
        environment=config.environment,
    )
    iam_outputs = iam_roles.get_outputs()

    # --- Layer 3: ECS ---
    cluster = EcsClusterComponent(
        name=base_name,
        environment=config.environment,
        cluster_name=config.cluster_name,
    )
    cluster_outputs = cluster.get_outputs()

    bastion = BastionServiceComponent(
        name=namer.name("bastion"),
        environment=config.environment,
        config=config,
        region=aws_region,
        cluster_arn=cluster_outputs.cluster_arn,
        subnet_ids=vpc_outputs.private_subnet_ids,
        security_group_id=sg_outputs.bastion_sg_id,
        task_role_arn=iam_outputs.task_role_arn,
        execution_role_arn=iam_outputs.execution_role_arn,
        opts=pulumi.ResourceOptions(depends_on=[cluster]),
    )
    bastion_outputs = bastion.get_outputs()

    # --- Layer 4: RDS ---
    rds = RdsMysqlComponent(
        name=namer.db_identifier("db"),
        environment=config.environment,
        config=config,
        subnet_ids=vpc_outputs.database_subnet_ids,
        security_group_id=sg_outputs.database_sg_id,
    )
    rds_outputs = rds.get_outputs()

    # --- Exports ---
    command = pulumi.Output.all(cluster_outputs.cluster_name, rds_outputs.address).apply(
        lambda args: port_forward_command(
            cluster_name=args[0],
            host=args[1],
            remote_port=PORTS["mysql"],
            local_port=PORTS["mysql"],
        )
    )

    outputs = {
        "vpc_id": vpc_outputs.vpc_id,
        "cluster_name": cluster_outputs.cluster_name,
        "service_name": bastion_outputs.service_name,
        "rds_endpoint": rds_outputs.address,
        "rds_secret_arn": rds_outputs.master_user_secret_arn,
        "port_forward_command": command,
    }

    # Write outputs to .env file for the port-forward helper
    write_outputs_to_env(outputs, "infrastructure.env")

    for key, value in outputs.items():
        pulumi.export(key, value)


# Execute
main()
