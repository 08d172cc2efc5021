"""Pre-flight checks for the pubcheck command.

Each check prints a red "Error:" line to stderr and exits 1 before the sweep
starts, so a bad invocation never leaves a partial report behind.
"""

from pathlib import Path

import click

from pubcheck.cli.output import user_output


class Ensure:
    """Fail-fast checks run before any registry is contacted."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Exit with error_message unless condition holds.

        Used for settings that can reach the command without passing through
        click validation, such as a worker count from an injected context.
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def directory_exists(path: Path, error_message: str | None = None) -> None:
        """Ensure path is an existing directory, otherwise output styled error and exit.

        Args:
            path: Directory that must exist
            error_message: Optional custom error message. If not provided,
                          uses default "Directory not found: {path}".

        Raises:
            SystemExit: If path is not a directory (with exit code 1)
        """
        if not path.is_dir():
            message = error_message if error_message is not None else f"Directory not found: {path}"
            user_output(click.style("Error: ", fg="red") + message)
            raise SystemExit(1)
