"""
ECS client for locating the bastion task.

Resolves the SSM target of a running task with two read-only calls:
list_tasks (RUNNING tasks of the service) and describe_tasks (container
runtime id). The first running task wins.

Dependencies: boto3
System role: ECS lookups for the port-forward helper
"""

import boto3

from bastion.core.exceptions import (
    NoRunningTaskError,
    RuntimeIdNotFoundError,
    TaskDetailsError,
)
from bastion.observability.logger import get_logger

logger = get_logger(__name__)


def task_id_from_arn(task_arn: str) -> str:
    """
    Extract the task id from a task ARN.

    Args:
        task_arn: arn:aws:ecs:<region>:<account>:task/<cluster>/<task_id>

    Returns:
        str: Last path segment of the ARN
    """
    return task_arn.rsplit("/", 1)[-1]


def build_ssm_target(cluster_name: str, task_id: str, runtime_id: str) -> str:
    """
    Build the SSM target string addressing a container in an ECS task.

    Args:
        cluster_name: ECS cluster name
        task_id: Task id (not the full ARN)
        runtime_id: Container runtime id from describe_tasks

    Returns:
        str: ecs:<cluster>_<task_id>_<runtime_id>
    """
    return f"ecs:{cluster_name}_{task_id}_{runtime_id}"


class EcsTaskLocator:
    """Finds a running task of a service and its SSM target."""

    def __init__(
        self,
        region: str = "ap-northeast-1",
        profile: str | None = None,
        ecs_client=None,
    ) -> None:
        """
        Initialize ECS client.

        Args:
            region: AWS region of the cluster
            profile: Optional named AWS profile
            ecs_client: Pre-built boto3 ECS client (skips session creation)
        """
        self._region = region
        if ecs_client is not None:
            self._ecs_client = ecs_client
        else:
            session_kwargs = {}
            if profile:
                session_kwargs["profile_name"] = profile
            session = boto3.Session(**session_kwargs)
            self._ecs_client = session.client("ecs", region_name=region)

    def get_running_task_arn(self, cluster_name: str, service_name: str) -> str:
        """
        Get the ARN of the first running task of a service.

        Args:
            cluster_name: ECS cluster name
            service_name: ECS service name

        Returns:
            str: Task ARN

        Raises:
            NoRunningTaskError: If the service has no running task
            ClientError: If the ECS API call fails
        """
        response = self._ecs_client.list_tasks(
            cluster=cluster_name,
            serviceName=service_name,
            desiredStatus="RUNNING",
        )
        task_arns = response.get("taskArns") or []
        if not task_arns:
            raise NoRunningTaskError(cluster_name, service_name)

        logger.debug(f"Found {len(task_arns)} running task(s), using {task_arns[0]}")
        return task_arns[0]

    def get_runtime_id(self, cluster_name: str, task_arn: str) -> str:
        """
        Get the runtime id of the task's first container.

        Args:
            cluster_name: ECS cluster name
            task_arn: Task ARN from get_running_task_arn

        Returns:
            str: Container runtime id

        Raises:
            TaskDetailsError: If the task or its containers are missing
            RuntimeIdNotFoundError: If the container has no runtime id
        """
        response = self._ecs_client.describe_tasks(
            cluster=cluster_name,
            tasks=[task_arn],
        )
        tasks = response.get("tasks") or []
        if not tasks or not tasks[0].get("containers"):
            raise TaskDetailsError(task_arn)

        runtime_id = tasks[0]["containers"][0].get("runtimeId")
        if not runtime_id:
            raise RuntimeIdNotFoundError(task_arn)
        return runtime_id

    def get_running_task_target(self, cluster_name: str, service_name: str) -> str:
        """
        Resolve the SSM target for a running task of the service.

        Args:
            cluster_name: ECS cluster name
            service_name: ECS service name

        Returns:
            str: SSM target (ecs:<cluster>_<task_id>_<runtime_id>)
        """
        task_arn = self.get_running_task_arn(cluster_name, service_name)
        runtime_id = self.get_runtime_id(cluster_name, task_arn)
        return build_ssm_target(cluster_name, task_id_from_arn(task_arn), runtime_id)
