"""Production implementation of GitHub Packages lookups."""

import logging
import os
import subprocess
from collections.abc import Mapping

from pubcheck.core.github.abc import GitHubPackages
from pubcheck.core.github.parsing import classify_gh_api_error
from pubcheck.core.github.types import PackageStatus, PackageType
from pubcheck.core.subprocess_utils import execute_gh_command

logger = logging.getLogger(__name__)


class RealGitHubPackages(GitHubPackages):
    """Production implementation using `gh api`.

    All lookups execute actual gh commands via subprocess.
    """

    def __init__(
        self,
        *,
        token: str | None,
        timeout: float,
        base_env: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize RealGitHubPackages.

        Args:
            token: GitHub token exported to gh as GH_TOKEN. If None, gh falls
                back to its own stored login.
            timeout: Seconds to wait for each gh call
            base_env: Environment to start from (defaults to os.environ)
        """
        self._token = token
        self._timeout = timeout
        self._base_env = base_env

    def _command_env(self) -> dict[str, str]:
        env = dict(os.environ if self._base_env is None else self._base_env)
        if self._token:
            env["GH_TOKEN"] = self._token
        return env

    def get_package_status(
        self, org: str, package_type: PackageType, package_name: str
    ) -> PackageStatus:
        """Look up an organisation package with `gh api`.

        Note: Uses try/except as an acceptable error boundary for handling gh CLI
        availability and authentication. We cannot reliably check gh installation
        and authentication status a priori without duplicating gh's logic.
        """
        cmd = ["gh", "api", f"/orgs/{org}/packages/{package_type}/{package_name}"]
        try:
            execute_gh_command(cmd, timeout=self._timeout, env=self._command_env())
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug("gh unavailable for %s: %s", package_name, e)
            return "UNAVAILABLE"
        except RuntimeError as e:
            status = classify_gh_api_error(str(e))
            logger.debug("gh lookup for %s failed (%s): %s", package_name, status, e)
            return status

        return "FOUND"
