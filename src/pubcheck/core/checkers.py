"""Per-registry existence checks.

Each RegistryTarget has one handler. Handlers build the target's URL, probe
it through the injected integrations and collapse every failure mode into
`exists=False`, so a sweep always completes. The failure tag on the result
keeps the cause for display without changing that contract.
"""

import json
import logging
from collections.abc import Callable
from urllib.parse import quote

from pubcheck.core.config import Credentials, RegistryConfig
from pubcheck.core.github.abc import GitHubPackages
from pubcheck.core.github.types import PackageStatus, PackageType
from pubcheck.core.http.abc import HttpClient
from pubcheck.core.http.types import HttpResponse
from pubcheck.core.types import ArtifactEntry, CheckResult, FailureReason, RegistryTarget

logger = logging.getLogger(__name__)

_PACKAGE_STATUS_FAILURES: dict[PackageStatus, FailureReason] = {
    "NOT_FOUND": "not-found",
    "UNAUTHORIZED": "unauthorized",
    "UNAVAILABLE": "unavailable",
}


def gitea_container_url(registries: RegistryConfig, name: str) -> str:
    return f"{registries.gitea_base}/{registries.github_org}/-/packages/container/{name}/latest"


def reposilite_jar_url(registries: RegistryConfig, name: str) -> str:
    """Get the maven-metadata.xml URL for an artifact in the Reposilite repository."""
    group_path = registries.maven_group.replace(".", "/")
    return (
        f"{registries.reposilite_base}/{registries.reposilite_repository}/{group_path}/"
        f"{name}/{registries.maven_version}/maven-metadata.xml"
    )


def npm_metadata_url(registries: RegistryConfig, package: str) -> str:
    # Scoped names keep the "@" but encode the "/" for the registry API
    return f"{registries.npm_registry}/{quote(package, safe='@')}"


def http_failure(response: HttpResponse | None) -> FailureReason | None:
    """Classify an HTTP probe: None when it counts as existing."""
    if response is None:
        return "network"
    if response.is_success:
        return None
    if response.status_code in (401, 403):
        return "unauthorized"
    return "not-found"


def npm_body_has_name(body: str) -> bool:
    """True iff body parses as a JSON object with a "name" field."""
    try:
        data = json.loads(body)
    except ValueError:
        return False
    return isinstance(data, dict) and "name" in data


class RegistryChecker:
    """Runs existence checks for any (artifact, target) pair."""

    def __init__(
        self,
        *,
        http: HttpClient,
        github: GitHubPackages,
        registries: RegistryConfig,
        credentials: Credentials,
    ) -> None:
        self._http = http
        self._github = github
        self._registries = registries
        self._credentials = credentials
        self._handlers: dict[RegistryTarget, Callable[[ArtifactEntry], CheckResult]] = {
            RegistryTarget.GITEA_CONTAINER: self._check_gitea_container,
            RegistryTarget.GITHUB_CONTAINER: self._check_github_container,
            RegistryTarget.REPOSILITE_JAR: self._check_reposilite_jar,
            RegistryTarget.GITHUB_JAR: self._check_github_jar,
            RegistryTarget.NPM: self._check_npm,
        }

    def check(self, entry: ArtifactEntry, target: RegistryTarget) -> CheckResult:
        """Check whether entry is published to target. Never raises."""
        result = self._handlers[target](entry)
        logger.debug(
            "%s @ %s: exists=%s failure=%s", entry.name, target.value, result.exists, result.failure
        )
        return result

    def _probe_url(self, entry: ArtifactEntry, target: RegistryTarget, url: str) -> CheckResult:
        response = self._http.get(url, token=self._credentials.for_target(target))
        failure = http_failure(response)
        return CheckResult(entry, target, url, exists=failure is None, failure=failure)

    def _check_gitea_container(self, entry: ArtifactEntry) -> CheckResult:
        url = gitea_container_url(self._registries, entry.name)
        return self._probe_url(entry, RegistryTarget.GITEA_CONTAINER, url)

    def _check_reposilite_jar(self, entry: ArtifactEntry) -> CheckResult:
        url = reposilite_jar_url(self._registries, entry.name)
        return self._probe_url(entry, RegistryTarget.REPOSILITE_JAR, url)

    def _lookup_github(
        self,
        entry: ArtifactEntry,
        target: RegistryTarget,
        package_type: PackageType,
        package_name: str,
        *,
        found_url: str,
        search_url: str,
    ) -> CheckResult:
        status = self._github.get_package_status(
            self._registries.github_org, package_type, package_name
        )
        if status == "FOUND":
            return CheckResult(entry, target, found_url, exists=True)
        return CheckResult(
            entry, target, search_url, exists=False, failure=_PACKAGE_STATUS_FAILURES[status]
        )

    def _check_github_container(self, entry: ArtifactEntry) -> CheckResult:
        org = self._registries.github_org
        return self._lookup_github(
            entry,
            RegistryTarget.GITHUB_CONTAINER,
            "container",
            entry.name,
            found_url=f"https://github.com/{org}/packages/container/{entry.name}",
            search_url=f"https://github.com/orgs/{org}/packages?ecosystem=container",
        )

    def _check_github_jar(self, entry: ArtifactEntry) -> CheckResult:
        org = self._registries.github_org
        package_name = f"{self._registries.maven_group}.{entry.name}"
        return self._lookup_github(
            entry,
            RegistryTarget.GITHUB_JAR,
            "maven",
            package_name,
            found_url=f"https://github.com/orgs/{org}/packages/maven/package/{package_name}",
            search_url=f"https://github.com/orgs/{org}/packages?q={entry.name}",
        )

    def _check_npm(self, entry: ArtifactEntry) -> CheckResult:
        package = entry.npm_package or entry.name
        url = f"{self._registries.npm_site}/package/{package}"
        metadata_url = npm_metadata_url(self._registries, package)

        response = self._http.get(metadata_url, token=None)
        failure = http_failure(response)
        if failure is None and response is not None and not npm_body_has_name(response.text):
            failure = "not-found"
        return CheckResult(entry, RegistryTarget.NPM, url, exists=failure is None, failure=failure)
