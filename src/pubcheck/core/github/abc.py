"""Abstract base class for GitHub Packages operations."""

from abc import ABC, abstractmethod

from pubcheck.core.github.types import PackageStatus, PackageType


class GitHubPackages(ABC):
    """Abstract interface for GitHub Packages metadata lookups.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get_package_status(
        self, org: str, package_type: PackageType, package_name: str
    ) -> PackageStatus:
        """Look up an organisation package.

        Args:
            org: GitHub organisation owning the package
            package_type: Package ecosystem ("container" or "maven")
            package_name: Package name as GitHub stores it
                (e.g. "io.pipeline.pipeline-api" for maven)

        Returns:
            PackageStatus describing the lookup. Never raises.
        """
        ...
