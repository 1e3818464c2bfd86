"""
Command templates exported with the stack.

The task id and runtime id change on every deployment, so the exported
command keeps them as placeholders for the operator (or the port-forward
helper) to fill in.
"""

import json

from IAC.configs.constants import SSM_PORT_FORWARD_DOCUMENT


def port_forward_command(
    cluster_name: str,
    host: str,
    remote_port: int,
    local_port: int,
) -> str:
    """
    Build the `aws ssm start-session` template for forwarding to a remote host.

    Args:
        cluster_name: ECS cluster hosting the bastion task
        host: Remote host reachable from the bastion (e.g. RDS endpoint)
        remote_port: Port on the remote host
        local_port: Port to listen on locally

    Returns:
        Shell command with <TASK_ID> and <RUNTIME_ID> placeholders
    """
    parameters = json.dumps(
        {
            "host": [host],
            "portNumber": [str(remote_port)],
            "localPortNumber": [str(local_port)],
        },
        separators=(",", ":"),
    )
    return " ".join([
        "aws ssm start-session",
        f"--target ecs:{cluster_name}_<TASK_ID>_<RUNTIME_ID>",
        f"--document-name {SSM_PORT_FORWARD_DOCUMENT}",
        f"--parameters '{parameters}'",
    ])
