"""
RDS MySQL Component reachable only through the bastion.

Access Control - Who Can Connect:
1. Bastion task (bastion_sg) -> Port 3306
2. Anyone else -> DENIED

How the Connection Works:
1. Placement: the instance lives in the isolated database subnets. Those have
   no default route, so the only path in is from inside the VPC.
2. Security Group: database_sg only allows 3306 from bastion_sg.
3. Operators: an SSM port-forwarding session to the bastion task relays a
   local port to <address>:3306.
4. Credentials: manage_master_user_password=True means AWS generates the
   password and stores it in Secrets Manager.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.base import EnvironmentConfig
from IAC.configs.constants import MYSQL_ENGINE_VERSION, PORTS
from IAC.utils.tags import create_tags


@dataclass
class RdsOutputs:
    """Output values from RDS component."""
    address: pulumi.Output[str]
    endpoint: pulumi.Output[str]
    port: pulumi.Output[int]
    database_name: pulumi.Output[str]
    master_user_secret_arn: pulumi.Output[str]


class RdsMysqlComponent(pulumi.ComponentResource):
    """
    Sample RDS MySQL database behind the bastion.

    Torn down with the stack outside production: no final snapshot and
    automated backups deleted.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: EnvironmentConfig,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:RdsMysql", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        self.db_name = config.db_name

        self.subnet_group = aws.rds.SubnetGroup(
            f"{name}-subnet-group",
            description="Subnet group for RDS",
            subnet_ids=subnet_ids,
            tags=create_tags(environment, f"{name}-subnet-group"),
            opts=child_opts,
        )

        self.instance = aws.rds.Instance(
            f"{name}-mysql",
            identifier=f"{name}-mysql",
            engine="mysql",
            engine_version=MYSQL_ENGINE_VERSION,
            instance_class=config.rds_instance_class,
            allocated_storage=config.rds_allocated_storage,
            storage_type="gp3",
            storage_encrypted=True,
            db_name=config.db_name,
            username=config.db_username,
            manage_master_user_password=True,
            port=PORTS["mysql"],
            db_subnet_group_name=self.subnet_group.name,
            vpc_security_group_ids=[security_group_id],
            publicly_accessible=False,
            multi_az=config.multi_az,
            deletion_protection=config.enable_deletion_protection,
            skip_final_snapshot=not config.is_production,
            final_snapshot_identifier=f"{name}-final-snapshot" if config.is_production else None,
            delete_automated_backups=not config.is_production,
            backup_retention_period=7 if config.is_production else 1,
            tags=create_tags(environment, f"{name}-mysql"),
            opts=child_opts,
        )

        self.register_outputs({
            "address": self.instance.address,
            "endpoint": self.instance.endpoint,
            "port": self.instance.port,
            "database_name": config.db_name,
        })

    def get_outputs(self) -> RdsOutputs:
        """Get RDS output values."""
        return RdsOutputs(
            address=self.instance.address,
            endpoint=self.instance.endpoint,
            port=self.instance.port,
            database_name=pulumi.Output.from_input(self.db_name),
            master_user_secret_arn=self.instance.master_user_secrets.apply(
                lambda secrets: secrets[0].secret_arn if secrets else ""
            ),
        )
