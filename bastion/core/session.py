"""
SSM port-forwarding session runner.

The session itself is handled by the AWS CLI (and its session-manager-plugin);
this module builds the command line, spawns it with the caller's terminal,
forwards Ctrl+C to it and reports how it ended.

Dependencies: subprocess, signal (stdlib)
System role: Child process management for the port-forward helper
"""

import json
import signal
import subprocess

from bastion.boundary.aws.ecs_client import EcsTaskLocator
from bastion.configs.settings import PortForwardSettings, get_settings
from bastion.core.exceptions import SessionStartError
from bastion.core.models import PortForwardOptions
from bastion.observability.logger import get_logger

logger = get_logger(__name__)


def build_session_parameters(remote_host: str, remote_port: int, local_port: int) -> str:
    """
    Build the --parameters JSON for the port-forwarding document.

    Args:
        remote_host: Host to reach from the bastion task
        remote_port: Port on the remote host
        local_port: Local port to listen on

    Returns:
        str: JSON document, every value a one-element list of strings
    """
    return json.dumps({
        "host": [remote_host],
        "portNumber": [str(remote_port)],
        "localPortNumber": [str(local_port)],
    })


def build_start_session_command(
    target: str,
    parameters: str,
    document_name: str,
    aws_cli: str = "aws",
    region: str | None = None,
    profile: str | None = None,
) -> list[str]:
    """
    Build the `aws ssm start-session` argument vector.

    Args:
        target: SSM target (ecs:<cluster>_<task_id>_<runtime_id>)
        parameters: Session parameters JSON
        document_name: SSM document name
        aws_cli: AWS CLI executable
        region: Region flag, omitted when None
        profile: Profile flag, omitted when None

    Returns:
        list[str]: Command suitable for subprocess without a shell
    """
    command = [
        aws_cli,
        "ssm",
        "start-session",
        "--target",
        target,
        "--document-name",
        document_name,
        "--parameters",
        parameters,
    ]
    if region:
        command.extend(["--region", region])
    if profile:
        command.extend(["--profile", profile])
    return command


class PortForwarder:
    """Opens a port-forwarding session through a running bastion task."""

    def __init__(
        self,
        locator: EcsTaskLocator,
        settings: PortForwardSettings | None = None,
    ) -> None:
        """
        Initialize forwarder.

        Args:
            locator: ECS lookup client for the cluster's region
            settings: Helper settings (defaults to get_settings())
        """
        self._locator = locator
        self._settings = settings or get_settings()

    def start(self, options: PortForwardOptions) -> int:
        """
        Resolve the bastion task and run the session until it exits.

        Args:
            options: Cluster, service and endpoints to forward

        Returns:
            int: Exit code of the AWS CLI process

        Raises:
            BastionError: If no usable task is found or the CLI cannot start
        """
        logger.info("Setting up port forwarding...")
        logger.info(f"Remote: {options.remote_host}:{options.remote_port}")
        logger.info(f"Local: localhost:{options.local_port}")

        target = self._locator.get_running_task_target(
            options.cluster_name, options.service_name
        )
        logger.info(f"SSM Target: {target}")

        command = build_start_session_command(
            target=target,
            parameters=build_session_parameters(
                options.remote_host, options.remote_port, options.local_port
            ),
            document_name=self._settings.document_name,
            aws_cli=self._settings.aws_cli,
            region=options.region or self._settings.region,
            profile=self._settings.profile,
        )

        logger.info("Starting port forwarding session...")
        logger.info("Press Ctrl+C to stop")

        forwarder = _InterruptForwarder()
        previous_handler = signal.signal(signal.SIGINT, forwarder)
        try:
            try:
                forwarder.process = subprocess.Popen(command)
            except OSError as e:
                logger.error(f"Error starting session: {e}")
                raise SessionStartError(command[0], str(e)) from e
            return_code = forwarder.process.wait()
        finally:
            signal.signal(signal.SIGINT, previous_handler)

        logger.info(f"Session ended with code: {return_code}")
        return return_code


class _InterruptForwarder:
    """SIGINT handler that passes the interrupt on to the session, once spawned."""

    def __init__(self) -> None:
        self.process: subprocess.Popen | None = None

    def __call__(self, signum, frame) -> None:
        logger.info("Stopping port forwarding...")
        if self.process is not None and self.process.poll() is None:
            self.process.send_signal(signal.SIGINT)
