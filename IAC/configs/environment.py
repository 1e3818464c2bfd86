"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from IAC.configs.base import EnvironmentConfig


def get_config() -> EnvironmentConfig:
    """
    Load environment configuration from Pulumi stack config.

    Returns:
        EnvironmentConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
    """
    config = pulumi.Config()
    defaults = EnvironmentConfig(environment="")

    return EnvironmentConfig(
        environment=config.require("environment"),
        max_azs=config.get_int("max_azs") or defaults.max_azs,
        nat_gateways=config.get_int("nat_gateways") or defaults.nat_gateways,
        cluster_name=config.get("cluster_name") or defaults.cluster_name,
        service_name=config.get("service_name") or defaults.service_name,
        bastion_image=config.get("bastion_image") or defaults.bastion_image,
        task_cpu=config.get_int("task_cpu") or defaults.task_cpu,
        task_memory=config.get_int("task_memory") or defaults.task_memory,
        desired_count=config.get_int("desired_count") or defaults.desired_count,
        log_retention_days=config.get_int("log_retention_days") or defaults.log_retention_days,
        rds_instance_class=config.get("rds_instance_class") or defaults.rds_instance_class,
        rds_allocated_storage=config.get_int("rds_allocated_storage") or defaults.rds_allocated_storage,
        db_name=config.get("db_name") or defaults.db_name,
        db_username=config.get("db_username") or defaults.db_username,
        enable_deletion_protection=config.get_bool("enable_deletion_protection") or False,
        multi_az=config.get_bool("multi_az") or False,
    )
