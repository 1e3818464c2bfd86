"""
Resource wiring tests using the Pulumi mock runtime.

Each test builds a component against mocks and inspects the inputs handed to
the engine. Resource names are unique per test since the mock runtime keeps
every registered URN for the whole session.
"""

import json
from pathlib import Path

import pulumi
import pytest


class BastionMocks(pulumi.runtime.Mocks):
    """Echo inputs back as state; ids are derived from the resource name."""

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        return [f"{args.name}_id", args.inputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}


pulumi.runtime.set_mocks(BastionMocks(), project="ecs-fargate-bastion", stack="test", preview=False)

from IAC.configs.base import EnvironmentConfig  # noqa: E402
from IAC.components.compute.bastion_service import BastionServiceComponent  # noqa: E402
from IAC.components.compute.ecs_cluster import EcsClusterComponent  # noqa: E402
from IAC.components.networking.security_groups import SecurityGroupsComponent  # noqa: E402
from IAC.components.networking.vpc import VpcComponent  # noqa: E402
from IAC.components.security.iam_roles import IamRolesComponent  # noqa: E402
from IAC.components.storage.rds_mysql import RdsMysqlComponent  # noqa: E402
from IAC.utils.outputs import write_outputs_to_env  # noqa: E402

ZONES = ["ap-northeast-1a", "ap-northeast-1c"]


def _bastion(name: str, config: EnvironmentConfig | None = None) -> BastionServiceComponent:
    return BastionServiceComponent(
        name=name,
        environment="test",
        config=config or EnvironmentConfig(environment="test"),
        region="ap-northeast-1",
        cluster_arn="arn:aws:ecs:ap-northeast-1:123456789012:cluster/bastion-cluster",
        subnet_ids=["subnet-a", "subnet-b"],
        security_group_id="sg-bastion",
        task_role_arn="arn:aws:iam::123456789012:role/task",
        execution_role_arn="arn:aws:iam::123456789012:role/execution",
    )


class TestVpcResources:
    """Tests for VPC subnet layout."""

    @pulumi.runtime.test
    def test_subnet_tiers_per_zone(self):
        """One public, private and database subnet per zone."""
        vpc = VpcComponent("vpc-tiers", environment="test", availability_zones=ZONES)

        assert len(vpc.public_subnets) == 2
        assert len(vpc.private_subnets) == 2
        assert len(vpc.database_subnets) == 2
        assert len(vpc.nat_gateways) == 1

        def check(args):
            public, private, database, cidr = args
            assert public == "10.0.0.0/24"
            assert private == "10.0.3.0/24"
            assert database == "10.0.6.0/24"
            assert cidr == "10.0.0.0/16"

        return pulumi.Output.all(
            vpc.public_subnets[0].cidr_block,
            vpc.private_subnets[0].cidr_block,
            vpc.database_subnets[0].cidr_block,
            vpc.vpc.cidr_block,
        ).apply(check)

    @pulumi.runtime.test
    def test_only_public_subnets_map_public_ips(self):
        """Private and database subnets never assign public IPs."""
        vpc = VpcComponent("vpc-public-ip", environment="test", availability_zones=ZONES[:1])

        def check(args):
            public, private, database = args
            assert public is True
            assert not private
            assert not database

        return pulumi.Output.all(
            vpc.public_subnets[0].map_public_ip_on_launch,
            vpc.private_subnets[0].map_public_ip_on_launch,
            vpc.database_subnets[0].map_public_ip_on_launch,
        ).apply(check)

    @pulumi.runtime.test
    def test_nat_gateways_capped_by_zones(self):
        """More NAT gateways than zones are not created."""
        vpc = VpcComponent(
            "vpc-nat-cap", environment="test", availability_zones=ZONES, nat_gateways=5
        )

        assert len(vpc.nat_gateways) == 2

    @pulumi.runtime.test
    def test_database_route_table_has_no_routes(self):
        """The isolated tier has no default route."""
        vpc = VpcComponent("vpc-isolated", environment="test", availability_zones=ZONES)

        def check(routes):
            assert not routes

        return vpc.database_rt.routes.apply(check)

    @pulumi.runtime.test
    def test_requires_availability_zones(self):
        """An empty zone list is rejected."""
        with pytest.raises(ValueError):
            VpcComponent("vpc-no-zones", environment="test", availability_zones=[])


class TestSecurityGroupResources:
    """Tests for security group rules."""

    @pulumi.runtime.test
    def test_database_ingress_from_bastion_only(self):
        """MySQL ingress references the bastion security group."""
        groups = SecurityGroupsComponent("sg-ingress", environment="test", vpc_id="vpc-1")
        rule = groups.database_ingress

        def check(args):
            protocol, from_port, to_port, source, cidr, description = args
            assert protocol == "tcp"
            assert from_port == 3306
            assert to_port == 3306
            assert source == "sg-ingress-bastion-sg_id"
            assert cidr is None
            assert description == "Allow access from bastion"

        return pulumi.Output.all(
            rule.ip_protocol,
            rule.from_port,
            rule.to_port,
            rule.referenced_security_group_id,
            rule.cidr_ipv4,
            rule.description,
        ).apply(check)

    @pulumi.runtime.test
    def test_bastion_allows_all_outbound(self):
        """Bastion egress allows every protocol to anywhere."""
        groups = SecurityGroupsComponent("sg-egress", environment="test", vpc_id="vpc-1")

        def check(args):
            protocol, cidr = args
            assert protocol == "-1"
            assert cidr == "0.0.0.0/0"

        return pulumi.Output.all(
            groups.bastion_egress.ip_protocol,
            groups.bastion_egress.cidr_ipv4,
        ).apply(check)

    @pulumi.runtime.test
    def test_database_allows_all_outbound(self):
        """Database egress allows every protocol to anywhere."""
        groups = SecurityGroupsComponent("sg-db-egress", environment="test", vpc_id="vpc-1")

        def check(args):
            group_id, protocol, cidr = args
            assert group_id == "sg-db-egress-database-sg_id"
            assert protocol == "-1"
            assert cidr == "0.0.0.0/0"

        return pulumi.Output.all(
            groups.database_egress.security_group_id,
            groups.database_egress.ip_protocol,
            groups.database_egress.cidr_ipv4,
        ).apply(check)

    @pulumi.runtime.test
    def test_group_descriptions(self):
        """Security groups carry descriptive names."""
        groups = SecurityGroupsComponent("sg-desc", environment="test", vpc_id="vpc-1")

        def check(args):
            assert args == ["Security group for ECS Fargate bastion", "Security group for RDS"]

        return pulumi.Output.all(
            groups.bastion_sg.description,
            groups.database_sg.description,
        ).apply(check)


class TestIamResources:
    """Tests for bastion IAM roles."""

    @pulumi.runtime.test
    def test_task_role_trusts_ecs_tasks(self):
        """Both roles are assumable by ecs-tasks.amazonaws.com."""
        roles = IamRolesComponent("iam-trust", environment="test")

        def check(args):
            for document in args:
                statement = json.loads(document)["Statement"][0]
                assert statement["Principal"] == {"Service": "ecs-tasks.amazonaws.com"}
                assert statement["Action"] == "sts:AssumeRole"

        return pulumi.Output.all(
            roles.task_role.assume_role_policy,
            roles.execution_role.assume_role_policy,
        ).apply(check)

    @pulumi.runtime.test
    def test_exec_policy_allows_ssm_channels(self):
        """The inline ECSExecPolicy grants the ssmmessages channel actions."""
        roles = IamRolesComponent("iam-exec", environment="test")

        def check(args):
            name, document = args
            statement = json.loads(document)["Statement"][0]
            assert name == "ECSExecPolicy"
            assert sorted(statement["Action"]) == [
                "ssmmessages:CreateControlChannel",
                "ssmmessages:CreateDataChannel",
                "ssmmessages:OpenControlChannel",
                "ssmmessages:OpenDataChannel",
            ]
            assert statement["Resource"] == ["*"]

        return pulumi.Output.all(roles.exec_policy.name, roles.exec_policy.policy).apply(check)


class TestEcsResources:
    """Tests for the cluster and bastion service."""

    @pulumi.runtime.test
    def test_cluster_capacity_providers(self):
        """The cluster enables FARGATE and FARGATE_SPOT."""
        cluster = EcsClusterComponent("ecs-cluster", environment="test", cluster_name="bastion-cluster")

        def check(args):
            name, providers = args
            assert name == "bastion-cluster"
            assert providers == ["FARGATE", "FARGATE_SPOT"]

        return pulumi.Output.all(
            cluster.cluster.name,
            cluster.capacity_providers.capacity_providers,
        ).apply(check)

    @pulumi.runtime.test
    def test_task_definition_container(self):
        """The container runs the SSM agent and ships logs to the bastion group."""
        bastion = _bastion("ecs-task-container")

        def check(document):
            containers = json.loads(document)
            assert len(containers) == 1
            container = containers[0]
            assert container["name"] == "BastionContainer"
            assert container["image"] == "amazonlinux:2"
            assert container["essential"] is True
            assert container["command"][:2] == ["/bin/bash", "-c"]
            assert "amazon-ssm-agent" in container["command"][2]
            options = container["logConfiguration"]["options"]
            assert container["logConfiguration"]["logDriver"] == "awslogs"
            assert options["awslogs-group"] == "/ecs/bastion-task"
            assert options["awslogs-stream-prefix"] == "bastion"
            assert options["awslogs-region"] == "ap-northeast-1"

        return bastion.task_definition.container_definitions.apply(check)

    @pulumi.runtime.test
    def test_task_definition_sizing(self):
        """The task is a Fargate awsvpc task with configured cpu and memory."""
        bastion = _bastion("ecs-task-sizing")

        def check(args):
            cpu, memory, network_mode, compatibilities = args
            assert cpu == "256"
            assert memory == "512"
            assert network_mode == "awsvpc"
            assert compatibilities == ["FARGATE"]

        definition = bastion.task_definition
        return pulumi.Output.all(
            definition.cpu,
            definition.memory,
            definition.network_mode,
            definition.requires_compatibilities,
        ).apply(check)

    @pulumi.runtime.test
    def test_service_enables_execute_command(self):
        """The service runs privately with ECS Exec enabled."""
        bastion = _bastion("ecs-service")

        def check(args):
            name, desired, launch_type, exec_enabled = args
            assert name == "bastion-service"
            assert desired == 1
            assert launch_type == "FARGATE"
            assert exec_enabled is True

        service = bastion.service
        return pulumi.Output.all(
            service.name,
            service.desired_count,
            service.launch_type,
            service.enable_execute_command,
        ).apply(check)

    @pulumi.runtime.test
    def test_log_group_retention(self):
        """Log retention follows the environment config."""
        bastion = _bastion("ecs-logs", EnvironmentConfig(environment="test", log_retention_days=14))

        def check(args):
            name, retention = args
            assert name == "/ecs/bastion-task"
            assert retention == 14

        return pulumi.Output.all(bastion.log_group.name, bastion.log_group.retention_in_days).apply(check)


class TestRdsResources:
    """Tests for the MySQL instance."""

    @pulumi.runtime.test
    def test_instance_settings(self):
        """MySQL is private, generated-password and removed with the stack."""
        rds = RdsMysqlComponent(
            "rds-settings",
            environment="test",
            config=EnvironmentConfig(environment="test"),
            subnet_ids=["subnet-db-a", "subnet-db-b"],
            security_group_id="sg-database",
        )
        instance = rds.instance

        def check(args):
            engine, instance_class, db_name, username, managed, public, skip_snapshot, port = args
            assert engine == "mysql"
            assert instance_class == "db.t3.micro"
            assert db_name == "sampledb"
            assert username == "admin"
            assert managed is True
            assert public is False
            assert skip_snapshot is True
            assert port == 3306

        return pulumi.Output.all(
            instance.engine,
            instance.instance_class,
            instance.db_name,
            instance.username,
            instance.manage_master_user_password,
            instance.publicly_accessible,
            instance.skip_final_snapshot,
            instance.port,
        ).apply(check)

    @pulumi.runtime.test
    def test_subnet_group_uses_database_subnets(self):
        """The subnet group spans the given isolated subnets."""
        rds = RdsMysqlComponent(
            "rds-subnets",
            environment="test",
            config=EnvironmentConfig(environment="test"),
            subnet_ids=["subnet-db-a", "subnet-db-b"],
            security_group_id="sg-database",
        )

        def check(args):
            subnet_ids, description, security_groups = args
            assert subnet_ids == ["subnet-db-a", "subnet-db-b"]
            assert description == "Subnet group for RDS"
            assert security_groups == ["sg-database"]

        return pulumi.Output.all(
            rds.subnet_group.subnet_ids,
            rds.subnet_group.description,
            rds.instance.vpc_security_group_ids,
        ).apply(check)


class TestOutputsFile:
    """Tests for writing stack outputs to a dotenv file."""

    @pulumi.runtime.test
    def test_writes_resolved_outputs(self):
        """Resolved outputs are written as upper-cased KEY=value lines."""
        target = Path("infrastructure.env")
        result = write_outputs_to_env(
            {
                "cluster_name": "bastion-cluster",
                "rds_endpoint": pulumi.Output.from_input("db.example.rds.amazonaws.com"),
            },
            str(target),
        )

        def check(path):
            assert path == str(target)
            assert target.read_text(encoding="utf-8") == (
                "CLUSTER_NAME=bastion-cluster\n"
                "RDS_ENDPOINT=db.example.rds.amazonaws.com\n"
            )

        return result.apply(check)
