"""
Pulumi component resources for the ECS Fargate bastion.

Each submodule provides reusable ComponentResource classes:
- networking: VPC, subnets, NAT, security groups
- security: IAM task and execution roles
- compute: ECS cluster, bastion Fargate service
- storage: RDS MySQL
"""
