from pubcheck.core.github.abc import GitHubPackages
from pubcheck.core.github.real import RealGitHubPackages
from pubcheck.core.github.types import PackageStatus, PackageType

__all__ = [
    "GitHubPackages",
    "PackageStatus",
    "PackageType",
    "RealGitHubPackages",
]
