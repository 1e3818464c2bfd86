"""
Pulumi infrastructure-as-code for the ECS Fargate bastion.

This package defines AWS infrastructure including:
- VPC with public, private and isolated database subnets
- ECS cluster with Fargate capacity providers
- Bastion Fargate service with ECS Exec enabled
- IAM task and execution roles
- RDS MySQL instance reachable only from the bastion
"""
