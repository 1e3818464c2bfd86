"""
Stack output helpers.

Writes resolved Pulumi outputs to a dotenv file so the port-forward helper
and local tooling can pick up cluster, service and endpoint names.
"""

from pathlib import Path

import pulumi


def format_env_lines(values: dict[str, object]) -> str:
    """
    Render a mapping as KEY=value lines.

    Args:
        values: Output names and resolved values

    Returns:
        Dotenv formatted text
    """
    lines = [f"{key.upper()}={value}" for key, value in values.items()]
    return "\n".join(lines) + "\n"


def write_outputs_to_env(
    outputs: dict[str, pulumi.Input[object]],
    filename: str,
) -> pulumi.Output[str]:
    """
    Write stack outputs to a dotenv file once every value resolves.

    Skipped during preview since values are unknown.

    Args:
        outputs: Output names mapped to Pulumi inputs/outputs
        filename: Target file, relative to the working directory

    Returns:
        Output resolving to the file path
    """
    keys = list(outputs.keys())

    def _write(values: list[object]) -> str:
        path = Path(filename)
        if pulumi.runtime.is_dry_run():
            return str(path)
        path.write_text(format_env_lines(dict(zip(keys, values))), encoding="utf-8")
        pulumi.log.info(f"Wrote {len(keys)} stack outputs to {path}")
        return str(path)

    return pulumi.Output.all(*outputs.values()).apply(_write)
