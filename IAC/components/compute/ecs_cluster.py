"""
ECS Cluster Component for the bastion.

The cluster has no EC2 capacity. Tasks run on FARGATE, with FARGATE_SPOT
registered so cheaper capacity can be opted into per service.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.utils.tags import create_tags

FARGATE_CAPACITY_PROVIDERS = ["FARGATE", "FARGATE_SPOT"]


@dataclass
class EcsClusterOutputs:
    """Output values from ECS cluster component."""
    cluster_arn: pulumi.Output[str]
    cluster_name: pulumi.Output[str]


class EcsClusterComponent(pulumi.ComponentResource):
    """ECS cluster with Fargate capacity providers enabled."""

    def __init__(
        self,
        name: str,
        environment: str,
        cluster_name: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:EcsCluster", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.cluster = aws.ecs.Cluster(
            f"{name}-cluster",
            name=cluster_name,
            tags=create_tags(environment, cluster_name),
            opts=child_opts,
        )

        self.capacity_providers = aws.ecs.ClusterCapacityProviders(
            f"{name}-capacity-providers",
            cluster_name=self.cluster.name,
            capacity_providers=FARGATE_CAPACITY_PROVIDERS,
            default_capacity_provider_strategies=[
                aws.ecs.ClusterCapacityProvidersDefaultCapacityProviderStrategyArgs(
                    capacity_provider="FARGATE",
                    weight=1,
                    base=1,
                ),
            ],
            opts=child_opts,
        )

        self.register_outputs({
            "cluster_arn": self.cluster.arn,
            "cluster_name": self.cluster.name,
        })

    def get_outputs(self) -> EcsClusterOutputs:
        """Get ECS cluster output values."""
        return EcsClusterOutputs(
            cluster_arn=self.cluster.arn,
            cluster_name=self.cluster.name,
        )
