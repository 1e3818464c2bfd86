"""
Security Groups Component for bastion and database access.

Access Patterns:
1. Bastion: No inbound rules at all. SSM sessions are initiated by the agent
   inside the task over outbound HTTPS, so nothing needs to reach the task.
   All outbound is allowed (package installs, SSM endpoints, RDS).
2. Database: Accepts MySQL (3306) ONLY from the bastion security group.
   Rejects everything else. All outbound is allowed.

Security Groups are stateful: the reply to an allowed inbound request is
allowed out automatically.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.constants import PORTS
from IAC.utils.tags import create_tags


@dataclass
class SecurityGroupOutputs:
    """Output values from security groups component."""
    bastion_sg_id: pulumi.Output[str]
    database_sg_id: pulumi.Output[str]


class SecurityGroupsComponent(pulumi.ComponentResource):
    """
    Security groups for the bastion task and the RDS instance.

    The database only trusts the bastion identity, not IP ranges.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        database_port: int = PORTS["mysql"],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:SecurityGroups", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        self.bastion_sg = aws.ec2.SecurityGroup(
            f"{name}-bastion-sg",
            description="Security group for ECS Fargate bastion",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-bastion-sg"),
            opts=child_opts,
        )

        self.database_sg = aws.ec2.SecurityGroup(
            f"{name}-database-sg",
            description="Security group for RDS",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-database-sg"),
            opts=child_opts,
        )

        self._create_rules(name, database_port, child_opts)

        self.register_outputs({
            "bastion_sg_id": self.bastion_sg.id,
            "database_sg_id": self.database_sg.id,
        })

    def _create_rules(
        self,
        name: str,
        database_port: int,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create security group rules."""
        # Bastion: Allow all outbound
        self.bastion_egress = aws.vpc.SecurityGroupEgressRule(
            f"{name}-bastion-egress-all",
            security_group_id=self.bastion_sg.id,
            ip_protocol="-1",
            cidr_ipv4="0.0.0.0/0",
            description="All outbound traffic",
            opts=opts,
        )

        # Database: Allow all outbound
        self.database_egress = aws.vpc.SecurityGroupEgressRule(
            f"{name}-database-egress-all",
            security_group_id=self.database_sg.id,
            ip_protocol="-1",
            cidr_ipv4="0.0.0.0/0",
            description="All outbound traffic",
            opts=opts,
        )

        # Database: Allow MySQL from bastion
        self.database_ingress = aws.vpc.SecurityGroupIngressRule(
            f"{name}-database-ingress-bastion",
            security_group_id=self.database_sg.id,
            ip_protocol="tcp",
            from_port=database_port,
            to_port=database_port,
            referenced_security_group_id=self.bastion_sg.id,
            description="Allow access from bastion",
            opts=opts,
        )

    def get_outputs(self) -> SecurityGroupOutputs:
        """Get security group output values."""
        return SecurityGroupOutputs(
            bastion_sg_id=self.bastion_sg.id,
            database_sg_id=self.database_sg.id,
        )
