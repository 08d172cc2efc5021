"""Application context with dependency injection."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from pubcheck.core.config import Credentials, SweepConfig
from pubcheck.core.github.abc import GitHubPackages
from pubcheck.core.github.real import RealGitHubPackages
from pubcheck.core.http.abc import HttpClient
from pubcheck.core.http.real import RealHttpClient
from pubcheck.core.time.abc import Time
from pubcheck.core.time.real import RealTime


@dataclass(frozen=True)
class SweepContext:
    """Immutable context holding all dependencies for a sweep.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    http: HttpClient
    github: GitHubPackages
    time: Time
    credentials: Credentials
    config: SweepConfig
    cwd: Path  # Current working directory at CLI invocation

    @staticmethod
    def for_test(
        http: HttpClient | None = None,
        github: GitHubPackages | None = None,
        time: Time | None = None,
        credentials: Credentials | None = None,
        config: SweepConfig | None = None,
        cwd: Path | None = None,
    ) -> "SweepContext":
        """Create test context with optional pre-configured integration classes.

        Args:
            http: Optional HttpClient. If None, creates empty FakeHttpClient
                (every URL answers 404).
            github: Optional GitHubPackages. If None, creates empty
                FakeGitHubPackages (every package is NOT_FOUND).
            time: Optional Time. If None, creates FakeTime.
            credentials: Optional Credentials. If None, all tokens are set to
                "test-token".
            config: Optional SweepConfig. If None, uses defaults.
            cwd: Optional working directory. If None, uses Path("/test/default/cwd").

        Returns:
            SweepContext configured with provided values and test defaults

        Example:
            >>> http = FakeHttpClient(responses={url: HttpResponse(200)})
            >>> ctx = SweepContext.for_test(http=http, cwd=tmp_path)
        """
        from pubcheck.core.github.fake import FakeGitHubPackages
        from pubcheck.core.http.fake import FakeHttpClient
        from pubcheck.core.time.fake import FakeTime

        return SweepContext(
            http=http if http is not None else FakeHttpClient(),
            github=github if github is not None else FakeGitHubPackages(),
            time=time if time is not None else FakeTime(),
            credentials=(
                credentials
                if credentials is not None
                else Credentials(github="test-token", gitea="test-token", reposilite="test-token")
            ),
            config=config if config is not None else SweepConfig(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
        )


def create_context(
    config: SweepConfig, *, env: Mapping[str, str] | None = None
) -> SweepContext:
    """Create production context with real implementations.

    Called at CLI entry point once the configuration is known.

    Args:
        config: Loaded sweep configuration
        env: Environment to read credentials from (defaults to os.environ)

    Returns:
        SweepContext with real integrations and resolved credentials
    """
    environ = os.environ if env is None else env
    credentials = Credentials.from_env(environ)

    return SweepContext(
        http=RealHttpClient(timeout=config.timeout_seconds),
        github=RealGitHubPackages(
            token=credentials.github, timeout=config.timeout_seconds, base_env=environ
        ),
        time=RealTime(),
        credentials=credentials,
        config=config,
        cwd=Path.cwd(),
    )
