"""
Port-forward helper settings.

Defaults for everything the command line does not pass explicitly.
Every field can be overridden with a BASTION_ prefixed environment variable
or a .env file.

Dependencies: pydantic_settings
System role: Configuration for the port-forward helper
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PortForwardSettings(BaseSettings):
    """Settings for ECS task lookup and the SSM session."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BASTION_",
        case_sensitive=False,
        extra="ignore",
    )

    region: str = Field(
        default="ap-northeast-1",
        description="AWS region used when none is given on the command line",
    )
    profile: str | None = Field(
        default=None,
        description="Named AWS profile for both boto3 and the AWS CLI",
    )
    aws_cli: str = Field(
        default="aws",
        description="AWS CLI executable used to start the session",
    )
    document_name: str = Field(
        default="AWS-StartPortForwardingSessionToRemoteHost",
        description="SSM document for remote host port forwarding",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )


@lru_cache
def get_settings() -> PortForwardSettings:
    """
    Get helper settings singleton.

    Environment variables are read once per process.

    Returns:
        PortForwardSettings: Settings instance
    """
    return PortForwardSettings()
