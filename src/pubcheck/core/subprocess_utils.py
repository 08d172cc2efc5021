"""Subprocess execution for GitHub CLI commands."""

import subprocess
from collections.abc import Mapping


def execute_gh_command(
    cmd: list[str],
    *,
    timeout: float,
    env: Mapping[str, str] | None = None,
) -> str:
    """Execute a gh CLI command and return stdout.

    Args:
        cmd: Command and arguments to execute
        timeout: Seconds to wait before giving up on the command
        env: Full environment for the child process, or None to inherit

    Returns:
        stdout from the command

    Raises:
        RuntimeError: If command exits non-zero, with stderr in the message
        FileNotFoundError: If gh is not installed
        subprocess.TimeoutExpired: If the command outlives timeout
    """
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
            timeout=timeout,
            env=dict(env) if env is not None else None,
        )
        return result.stdout
    except subprocess.CalledProcessError as e:
        cmd_str = " ".join(cmd)
        error_msg = f"Failed to execute gh command '{cmd_str}'"
        if e.stderr:
            error_msg += f": {e.stderr.strip()}"
        raise RuntimeError(error_msg) from e
