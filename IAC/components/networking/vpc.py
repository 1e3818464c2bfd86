"""
VPC Component Resource for the bastion network.

Layout (one subnet of each tier per availability zone):
1. Public (10.0.0-2.0/24): NAT gateways live here. Routed to the Internet Gateway.
2. Private (10.0.3-5.0/24): Bastion Fargate tasks. Outbound only, through NAT,
   so the task can install and run the SSM agent.
3. Database (10.0.6-8.0/24): RDS. Isolated: no default route at all, the
   implicit "local" route is the only path in or out.

Nothing in the private or database tiers has a public IP. Operators reach the
database through an SSM session brokered by the bastion task.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.constants import VPC_CIDR, SUBNET_CIDRS
from IAC.utils.tags import create_tags


@dataclass
class VpcOutputs:
    """Output values from VPC component."""
    vpc_id: pulumi.Output[str]
    public_subnet_ids: list[pulumi.Output[str]]
    private_subnet_ids: list[pulumi.Output[str]]
    database_subnet_ids: list[pulumi.Output[str]]
    nat_gateway_ids: list[pulumi.Output[str]]


class VpcComponent(pulumi.ComponentResource):
    """
    VPC component with public, private-with-egress and isolated subnets.

    NAT gateways are placed in the first `nat_gateways` public subnets; private
    subnets in other zones share the last NAT gateway.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        availability_zones: list[str],
        nat_gateways: int = 1,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:Vpc", name, None, opts)
        self.environment = environment

        if not availability_zones:
            raise ValueError("At least one availability zone is required")
        if len(availability_zones) > len(SUBNET_CIDRS["public"]):
            raise ValueError(
                f"At most {len(SUBNET_CIDRS['public'])} availability zones are supported"
            )

        child_opts = pulumi.ResourceOptions(parent=self)

        self.vpc = aws.ec2.Vpc(
            f"{name}-vpc",
            cidr_block=VPC_CIDR,
            enable_dns_hostnames=True,
            enable_dns_support=True,
            tags=create_tags(environment, f"{name}-vpc"),
            opts=child_opts,
        )

        self.igw = aws.ec2.InternetGateway(
            f"{name}-igw",
            vpc_id=self.vpc.id,
            tags=create_tags(environment, f"{name}-igw"),
            opts=child_opts,
        )

        self.public_subnets = self._create_subnets(
            name, "public", availability_zones, child_opts, map_public_ip_on_launch=True
        )
        self.private_subnets = self._create_subnets(
            name, "private", availability_zones, child_opts
        )
        self.database_subnets = self._create_subnets(
            name, "database", availability_zones, child_opts
        )

        self.nat_gateways = self._create_nat_gateways(
            name, max(1, min(nat_gateways, len(availability_zones))), child_opts
        )

        self._create_route_tables(name, child_opts)

        self.register_outputs({
            "vpc_id": self.vpc.id,
            "public_subnet_ids": [s.id for s in self.public_subnets],
            "private_subnet_ids": [s.id for s in self.private_subnets],
            "database_subnet_ids": [s.id for s in self.database_subnets],
        })

    def _create_subnets(
        self,
        name: str,
        tier: str,
        availability_zones: list[str],
        opts: pulumi.ResourceOptions,
        map_public_ip_on_launch: bool = False,
    ) -> list[aws.ec2.Subnet]:
        """Create one subnet of the given tier in each availability zone."""
        subnets = []
        for index, zone in enumerate(availability_zones):
            subnet_name = f"{name}-{tier}-subnet-{index + 1}"
            subnets.append(aws.ec2.Subnet(
                subnet_name,
                vpc_id=self.vpc.id,
                cidr_block=SUBNET_CIDRS[tier][index],
                availability_zone=zone,
                map_public_ip_on_launch=map_public_ip_on_launch,
                tags=create_tags(self.environment, subnet_name, Tier=tier),
                opts=opts,
            ))
        return subnets

    def _create_nat_gateways(
        self,
        name: str,
        count: int,
        opts: pulumi.ResourceOptions,
    ) -> list[aws.ec2.NatGateway]:
        """Create NAT gateways (with Elastic IPs) in the first public subnets."""
        gateways = []
        for index in range(count):
            eip = aws.ec2.Eip(
                f"{name}-nat-eip-{index + 1}",
                domain="vpc",
                tags=create_tags(self.environment, f"{name}-nat-eip-{index + 1}"),
                opts=opts,
            )
            gateways.append(aws.ec2.NatGateway(
                f"{name}-nat-{index + 1}",
                allocation_id=eip.id,
                subnet_id=self.public_subnets[index].id,
                tags=create_tags(self.environment, f"{name}-nat-{index + 1}"),
                opts=pulumi.ResourceOptions(parent=self, depends_on=[self.igw]),
            ))
        return gateways

    def _create_route_tables(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create route tables for each subnet tier."""
        # Public: default route to the Internet Gateway
        public_rt = aws.ec2.RouteTable(
            f"{name}-public-rt",
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block="0.0.0.0/0",
                    gateway_id=self.igw.id,
                ),
            ],
            tags=create_tags(self.environment, f"{name}-public-rt"),
            opts=opts,
        )
        for index, subnet in enumerate(self.public_subnets):
            aws.ec2.RouteTableAssociation(
                f"{name}-public-rt-assoc-{index + 1}",
                subnet_id=subnet.id,
                route_table_id=public_rt.id,
                opts=opts,
            )

        # Private: default route through the zone's NAT gateway
        self.private_route_tables = []
        for index, subnet in enumerate(self.private_subnets):
            nat = self.nat_gateways[min(index, len(self.nat_gateways) - 1)]
            private_rt = aws.ec2.RouteTable(
                f"{name}-private-rt-{index + 1}",
                vpc_id=self.vpc.id,
                routes=[
                    aws.ec2.RouteTableRouteArgs(
                        cidr_block="0.0.0.0/0",
                        nat_gateway_id=nat.id,
                    ),
                ],
                tags=create_tags(self.environment, f"{name}-private-rt-{index + 1}"),
                opts=opts,
            )
            aws.ec2.RouteTableAssociation(
                f"{name}-private-rt-assoc-{index + 1}",
                subnet_id=subnet.id,
                route_table_id=private_rt.id,
                opts=opts,
            )
            self.private_route_tables.append(private_rt)

        # Database: local route only
        self.database_rt = aws.ec2.RouteTable(
            f"{name}-database-rt",
            vpc_id=self.vpc.id,
            routes=[],
            tags=create_tags(self.environment, f"{name}-database-rt"),
            opts=opts,
        )
        for index, subnet in enumerate(self.database_subnets):
            aws.ec2.RouteTableAssociation(
                f"{name}-database-rt-assoc-{index + 1}",
                subnet_id=subnet.id,
                route_table_id=self.database_rt.id,
                opts=opts,
            )

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=self.vpc.id,
            public_subnet_ids=[s.id for s in self.public_subnets],
            private_subnet_ids=[s.id for s in self.private_subnets],
            database_subnet_ids=[s.id for s in self.database_subnets],
            nat_gateway_ids=[n.id for n in self.nat_gateways],
        )
