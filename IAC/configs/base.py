"""
Base configuration dataclass for environment settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Environment-specific configuration for infrastructure deployment.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        max_azs: Number of availability zones to spread subnets across
        nat_gateways: Number of NAT gateways for private subnet egress
        cluster_name: ECS cluster name
        service_name: ECS bastion service name
        bastion_image: Container image for the bastion task
        task_cpu: Fargate task CPU units
        task_memory: Fargate task memory in MiB
        desired_count: Number of bastion tasks to keep running
        log_retention_days: CloudWatch log retention for the bastion task
        rds_instance_class: RDS instance class for MySQL
        rds_allocated_storage: RDS storage in GB
        db_name: Initial database name
        db_username: Master username (password is generated)
        enable_deletion_protection: Enable deletion protection for the database
        multi_az: Enable multi-AZ deployment for RDS
    """
    environment: str
    max_azs: int = 2
    nat_gateways: int = 1
    cluster_name: str = "bastion-cluster"
    service_name: str = "bastion-service"
    bastion_image: str = "amazonlinux:2"
    task_cpu: int = 256
    task_memory: int = 512
    desired_count: int = 1
    log_retention_days: int = 7
    rds_instance_class: str = "db.t3.micro"
    rds_allocated_storage: int = 20
    db_name: str = "sampledb"
    db_username: str = "admin"
    enable_deletion_protection: bool = False
    multi_az: bool = False

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    def get_tags(self) -> dict[str, str]:
        """Get environment-specific tags."""
        return {
            "Environment": self.environment,
        }
