"""
Port-forward request model.

Dependencies: pydantic
System role: Validated CLI input
"""

from pydantic import BaseModel, Field


class PortForwardOptions(BaseModel):
    """Everything needed to open one port-forwarding session."""

    cluster_name: str = Field(min_length=1, description="ECS cluster name")
    service_name: str = Field(min_length=1, description="ECS service running the bastion")
    remote_host: str = Field(min_length=1, description="Host reachable from the bastion task")
    remote_port: int = Field(ge=1, le=65535, description="Port on the remote host")
    local_port: int = Field(ge=1, le=65535, description="Local port to listen on")
    region: str | None = Field(default=None, description="AWS region of the cluster")
