"""
Port forwarding through the ECS Fargate bastion.

Usage:
    bastion-port-forward <cluster> <service> <remote_host> <remote_port> <local_port> [region]
    python -m bastion.scripts.port_forward bastion-cluster bastion-service mydb.xxx.rds.amazonaws.com 3306 3306

Purpose:
- Find a running task of the bastion service
- Resolve its SSM target from the container runtime id
- Run `aws ssm start-session` with the remote host port-forwarding document

Exit status is 1 on usage errors, missing tasks or session start failures,
otherwise the AWS CLI's own exit status.

Dependencies: boto3, AWS CLI with session-manager-plugin
System role: CLI entry point for the port-forward helper
"""

import sys

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from bastion.boundary.aws.ecs_client import EcsTaskLocator
from bastion.configs.settings import get_settings
from bastion.core.exceptions import BastionError, UsageError
from bastion.core.models import PortForwardOptions
from bastion.core.session import PortForwarder
from bastion.observability.logger import configure_logging, get_logger

logger = get_logger(__name__)

USAGE = (
    "Usage: bastion-port-forward <cluster> <service> <remote_host> "
    "<remote_port> <local_port> [region]"
)
EXAMPLE = (
    "  bastion-port-forward bastion-cluster bastion-service "
    "mydb.cluster-xxx.rds.amazonaws.com 3306 3306"
)


def print_usage() -> None:
    """Print usage and an example invocation."""
    print(USAGE)
    print("")
    print("Example:")
    print(EXAMPLE)


def parse_args(args: list[str]) -> PortForwardOptions:
    """
    Turn positional arguments into validated options.

    Args:
        args: Arguments after the program name

    Returns:
        PortForwardOptions: Validated options

    Raises:
        UsageError: On a wrong argument count or invalid ports
    """
    if len(args) < 5 or len(args) > 6:
        raise UsageError(f"Expected 5 or 6 arguments, got {len(args)}")

    cluster_name, service_name, remote_host, remote_port, local_port = args[:5]
    region = args[5] if len(args) == 6 else None

    try:
        ports = int(remote_port), int(local_port)
    except ValueError as e:
        raise UsageError(f"Ports must be integers: {remote_port}, {local_port}") from e

    try:
        return PortForwardOptions(
            cluster_name=cluster_name,
            service_name=service_name,
            remote_host=remote_host,
            remote_port=ports[0],
            local_port=ports[1],
            region=region,
        )
    except ValidationError as e:
        raise UsageError("Invalid arguments", {"errors": e.errors()}) from e


def run(args: list[str]) -> int:
    """
    Run the helper and return the process exit code.

    Args:
        args: Arguments after the program name

    Returns:
        int: Exit code
    """
    try:
        options = parse_args(args)
    except UsageError as e:
        logger.debug(f"Usage error: {e}")
        print_usage()
        return 1

    settings = get_settings()
    region = options.region or settings.region

    try:
        locator = EcsTaskLocator(region=region, profile=settings.profile)
        forwarder = PortForwarder(locator, settings)
        return forwarder.start(options)
    except BastionError as e:
        logger.error(f"Error: {e}")
        return 1
    except (ClientError, BotoCoreError) as e:
        logger.error(f"AWS error: {e}")
        return 1


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    configure_logging(get_settings().log_level)
    args = sys.argv[1:] if argv is None else argv
    sys.exit(run(args))


if __name__ == "__main__":
    main()
