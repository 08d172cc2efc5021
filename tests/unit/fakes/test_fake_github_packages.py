"""Tests for FakeGitHubPackages test infrastructure."""

from pubcheck.core.github.fake import FakeGitHubPackages


def test_empty_fake_reports_not_found() -> None:
    github = FakeGitHubPackages()

    assert github.get_package_status("org", "container", "svc") == "NOT_FOUND"


def test_configured_package_found() -> None:
    github = FakeGitHubPackages(packages={("maven", "io.pipeline.lib")})

    assert github.get_package_status("org", "maven", "io.pipeline.lib") == "FOUND"
    # Same name under a different ecosystem is a different package
    assert github.get_package_status("org", "container", "io.pipeline.lib") == "NOT_FOUND"


def test_explicit_status_wins_over_packages() -> None:
    github = FakeGitHubPackages(
        packages={("container", "svc")},
        statuses={("container", "svc"): "UNAUTHORIZED"},
    )

    assert github.get_package_status("org", "container", "svc") == "UNAUTHORIZED"


def test_default_status_simulates_broken_gh() -> None:
    github = FakeGitHubPackages(default_status="UNAVAILABLE")

    assert github.get_package_status("org", "container", "svc") == "UNAVAILABLE"


def test_lookups_tracked() -> None:
    github = FakeGitHubPackages()

    github.get_package_status("org", "container", "svc")
    github.get_package_status("org", "maven", "io.pipeline.svc")

    assert github.lookups == [
        ("org", "container", "svc"),
        ("org", "maven", "io.pipeline.svc"),
    ]
