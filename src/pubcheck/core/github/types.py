"""Type definitions for GitHub Packages lookups."""

from typing import Literal

# FOUND: package metadata returned
# NOT_FOUND: gh answered but the package is absent (or any other API error)
# UNAUTHORIZED: gh is not logged in or the token was rejected
# UNAVAILABLE: gh is missing, not executable or timed out
PackageStatus = Literal["FOUND", "NOT_FOUND", "UNAUTHORIZED", "UNAVAILABLE"]

# Package types accepted by /orgs/{org}/packages/{package_type}/{package_name}
PackageType = Literal["container", "maven"]
