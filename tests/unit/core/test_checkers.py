"""Tests for per-registry existence checks.

Checks run against FakeHttpClient and FakeGitHubPackages. The real
integrations are covered in tests/unit/integrations/.
"""

import json

import pytest

from pubcheck.core.checkers import RegistryChecker, http_failure, npm_body_has_name
from pubcheck.core.config import Credentials, RegistryConfig
from pubcheck.core.github.fake import FakeGitHubPackages
from pubcheck.core.github.types import PackageStatus
from pubcheck.core.http.fake import FakeHttpClient
from pubcheck.core.http.types import HttpResponse
from pubcheck.core.types import ArtifactEntry, ArtifactKind, RegistryTarget

ALPHA = ArtifactEntry("alpha", ArtifactKind.SERVICE)
STUBS = ArtifactEntry(
    "grpc-stubs", ArtifactKind.SPECIAL, project="grpc", npm_package="@io-pipeline/grpc-stubs"
)

GITEA_URL = "https://git.rokkon.com/io-pipeline/-/packages/container/alpha/latest"
REPOSILITE_URL = (
    "https://maven.rokkon.com/snapshots/io/pipeline/alpha/1.0.0-SNAPSHOT/maven-metadata.xml"
)
NPM_METADATA_URL = "https://registry.npmjs.org/@io-pipeline%2Fgrpc-stubs"

CREDS = Credentials(github="gh-token", gitea="gitea-token", reposilite="repo-token")


def _checker(
    http: FakeHttpClient | None = None,
    github: FakeGitHubPackages | None = None,
    credentials: Credentials = CREDS,
) -> RegistryChecker:
    return RegistryChecker(
        http=http or FakeHttpClient(),
        github=github or FakeGitHubPackages(),
        registries=RegistryConfig(),
        credentials=credentials,
    )


# ============================================================================
# Classification helpers
# ============================================================================


@pytest.mark.parametrize("status", [200, 201, 204, 299])
def test_http_failure_2xx_exists(status: int) -> None:
    assert http_failure(HttpResponse(status)) is None


@pytest.mark.parametrize(
    ("status", "reason"),
    [
        (199, "not-found"),
        (300, "not-found"),
        (401, "unauthorized"),
        (403, "unauthorized"),
        (404, "not-found"),
        (500, "not-found"),
    ],
)
def test_http_failure_non_2xx(status: int, reason: str) -> None:
    assert http_failure(HttpResponse(status)) == reason


def test_http_failure_no_response_is_network() -> None:
    assert http_failure(None) == "network"


def test_npm_body_has_name() -> None:
    assert npm_body_has_name('{"name": "@io-pipeline/grpc-stubs"}') is True
    assert npm_body_has_name('{"error": "Not found"}') is False
    assert npm_body_has_name('["name"]') is False
    assert npm_body_has_name("<html>name</html>") is False
    assert npm_body_has_name("") is False


# ============================================================================
# Gitea / Reposilite
# ============================================================================


def test_gitea_container_exists_on_2xx_with_gitea_token() -> None:
    http = FakeHttpClient(responses={GITEA_URL: HttpResponse(200)})

    result = _checker(http=http).check(ALPHA, RegistryTarget.GITEA_CONTAINER)

    assert result.exists is True
    assert result.failure is None
    assert result.url == GITEA_URL
    assert http.get_calls == [(GITEA_URL, "gitea-token")]


def test_gitea_container_missing() -> None:
    result = _checker().check(ALPHA, RegistryTarget.GITEA_CONTAINER)

    assert result.exists is False
    assert result.failure == "not-found"
    assert result.url == GITEA_URL


def test_reposilite_jar_exists_with_reposilite_token() -> None:
    http = FakeHttpClient(responses={REPOSILITE_URL: HttpResponse(200, "<metadata/>")})

    result = _checker(http=http).check(ALPHA, RegistryTarget.REPOSILITE_JAR)

    assert result.exists is True
    assert result.url == REPOSILITE_URL
    assert http.get_calls == [(REPOSILITE_URL, "repo-token")]


def test_reposilite_jar_network_failure_degrades() -> None:
    http = FakeHttpClient(unreachable={REPOSILITE_URL})

    result = _checker(http=http).check(ALPHA, RegistryTarget.REPOSILITE_JAR)

    assert result.exists is False
    assert result.failure == "network"


def test_missing_credential_degrades_to_not_existing() -> None:
    """Registry demands a token we do not have: check fails, nothing raises."""
    http = FakeHttpClient(
        responses={GITEA_URL: HttpResponse(200), REPOSILITE_URL: HttpResponse(200)},
        required_token="gitea-token",
    )
    creds = Credentials(github=None, gitea=None, reposilite=None)

    checker = _checker(http=http, credentials=creds)
    gitea = checker.check(ALPHA, RegistryTarget.GITEA_CONTAINER)

    assert gitea.exists is False
    assert gitea.failure == "unauthorized"
    assert http.get_calls == [(GITEA_URL, None)]


# ============================================================================
# GitHub Packages
# ============================================================================


def test_github_container_found_links_to_package() -> None:
    github = FakeGitHubPackages(packages={("container", "alpha")})

    result = _checker(github=github).check(ALPHA, RegistryTarget.GITHUB_CONTAINER)

    assert result.exists is True
    assert result.url == "https://github.com/io-pipeline/packages/container/alpha"
    assert github.lookups == [("io-pipeline", "container", "alpha")]


def test_github_container_missing_links_to_search() -> None:
    result = _checker().check(ALPHA, RegistryTarget.GITHUB_CONTAINER)

    assert result.exists is False
    assert result.url == "https://github.com/orgs/io-pipeline/packages?ecosystem=container"


def test_github_jar_uses_maven_group_prefix() -> None:
    github = FakeGitHubPackages(packages={("maven", "io.pipeline.alpha")})

    result = _checker(github=github).check(ALPHA, RegistryTarget.GITHUB_JAR)

    assert result.exists is True
    assert result.url == (
        "https://github.com/orgs/io-pipeline/packages/maven/package/io.pipeline.alpha"
    )
    assert github.lookups == [("io-pipeline", "maven", "io.pipeline.alpha")]


def test_github_jar_missing_links_to_search() -> None:
    result = _checker().check(ALPHA, RegistryTarget.GITHUB_JAR)

    assert result.exists is False
    assert result.url == "https://github.com/orgs/io-pipeline/packages?q=alpha"


@pytest.mark.parametrize(
    ("status", "reason"),
    [("NOT_FOUND", "not-found"), ("UNAUTHORIZED", "unauthorized"), ("UNAVAILABLE", "unavailable")],
)
def test_github_failures_keep_reason(status: PackageStatus, reason: str) -> None:
    github = FakeGitHubPackages(default_status=status)

    result = _checker(github=github).check(ALPHA, RegistryTarget.GITHUB_JAR)

    assert result.exists is False
    assert result.failure == reason


# ============================================================================
# npm
# ============================================================================


def test_npm_exists_when_body_has_name() -> None:
    body = json.dumps({"name": "@io-pipeline/grpc-stubs", "versions": {}})
    http = FakeHttpClient(responses={NPM_METADATA_URL: HttpResponse(200, body)})

    result = _checker(http=http).check(STUBS, RegistryTarget.NPM)

    assert result.exists is True
    assert result.url == "https://www.npmjs.com/package/@io-pipeline/grpc-stubs"
    assert http.get_calls == [(NPM_METADATA_URL, None)]


def test_npm_malformed_body_is_not_existing() -> None:
    http = FakeHttpClient(responses={NPM_METADATA_URL: HttpResponse(200, "{not json")})

    result = _checker(http=http).check(STUBS, RegistryTarget.NPM)

    assert result.exists is False
    assert result.failure == "not-found"


def test_npm_body_without_name_is_not_existing() -> None:
    http = FakeHttpClient(responses={NPM_METADATA_URL: HttpResponse(200, '{"error": "gone"}')})

    result = _checker(http=http).check(STUBS, RegistryTarget.NPM)

    assert result.exists is False


def test_npm_unknown_package() -> None:
    result = _checker().check(STUBS, RegistryTarget.NPM)

    assert result.exists is False
    assert result.failure == "not-found"


def test_custom_registries_change_urls() -> None:
    registries = RegistryConfig(
        github_org="acme",
        gitea_base="https://gitea.acme.test",
        reposilite_base="https://repo.acme.test",
        reposilite_repository="releases",
        maven_group="com.acme",
        maven_version="2.0.0",
    )
    checker = RegistryChecker(
        http=FakeHttpClient(),
        github=FakeGitHubPackages(),
        registries=registries,
        credentials=CREDS,
    )

    gitea = checker.check(ALPHA, RegistryTarget.GITEA_CONTAINER)
    jar = checker.check(ALPHA, RegistryTarget.REPOSILITE_JAR)

    assert gitea.url == "https://gitea.acme.test/acme/-/packages/container/alpha/latest"
    assert jar.url == "https://repo.acme.test/releases/com/acme/alpha/2.0.0/maven-metadata.xml"
