"""Fake GitHub Packages operations for testing.

FakeGitHubPackages is an in-memory implementation that accepts pre-configured
state in its constructor. Construct instances directly with keyword arguments.
"""

from pubcheck.core.github.abc import GitHubPackages
from pubcheck.core.github.types import PackageStatus, PackageType


class FakeGitHubPackages(GitHubPackages):
    """In-memory fake implementation of GitHub Packages lookups.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        packages: set[tuple[PackageType, str]] | None = None,
        statuses: dict[tuple[PackageType, str], PackageStatus] | None = None,
        default_status: PackageStatus = "NOT_FOUND",
    ) -> None:
        """Create FakeGitHubPackages with pre-configured state.

        Args:
            packages: (package_type, package_name) pairs that exist
            statuses: Explicit status per (package_type, package_name); wins over packages
            default_status: Status for anything not configured. Use "UNAUTHORIZED"
                or "UNAVAILABLE" to simulate a broken gh setup.
        """
        self._packages = packages or set()
        self._statuses = statuses or {}
        self._default_status = default_status
        self._lookups: list[tuple[str, PackageType, str]] = []

    @property
    def lookups(self) -> list[tuple[str, PackageType, str]]:
        """Read-only access to tracked lookups for test assertions.

        Returns list of (org, package_type, package_name) tuples.
        """
        return self._lookups

    def get_package_status(
        self, org: str, package_type: PackageType, package_name: str
    ) -> PackageStatus:
        self._lookups.append((org, package_type, package_name))
        key = (package_type, package_name)
        if key in self._statuses:
            return self._statuses[key]
        if key in self._packages:
            return "FOUND"
        return self._default_status
