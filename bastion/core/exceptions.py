"""
Exception hierarchy for the port-forward helper.

All exceptions carry a details dict for logging. The CLI entry point turns
any BastionError into exit status 1.

Dependencies: None (pure domain layer)
System role: Centralized error types
"""

from typing import Any


class BastionError(Exception):
    """Base exception for all port-forward helper errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class UsageError(BastionError):
    """Raised when command line arguments are missing or malformed."""


class NoRunningTaskError(BastionError):
    """Raised when the service has no task in RUNNING state."""

    def __init__(self, cluster_name: str, service_name: str) -> None:
        super().__init__(
            f"No running tasks found for service {service_name} in cluster {cluster_name}",
            {"cluster": cluster_name, "service": service_name},
        )


class TaskDetailsError(BastionError):
    """Raised when describe_tasks returns no task or no containers."""

    def __init__(self, task_arn: str) -> None:
        super().__init__("Could not get task details", {"task_arn": task_arn})


class RuntimeIdNotFoundError(BastionError):
    """Raised when the task's container has no runtime id yet."""

    def __init__(self, task_arn: str) -> None:
        super().__init__("Could not get runtime ID", {"task_arn": task_arn})


class SessionStartError(BastionError):
    """Raised when the AWS CLI session process cannot be spawned."""

    def __init__(self, command: str, reason: str) -> None:
        super().__init__(
            f"Failed to start session: {reason}",
            {"command": command},
        )
