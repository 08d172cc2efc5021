"""Sweep configuration: registry locations, credentials, catalog and tuning.

Credentials come from the environment and are resolved once at the CLI entry
point. Everything else has built-in defaults that an optional TOML file can
override.
"""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pubcheck.core.catalog import (
    DEFAULT_CATALOG,
    DEFAULT_LIBRARIES,
    DEFAULT_SERVICES,
    DEFAULT_SPECIALS,
    build_catalog,
)
from pubcheck.core.types import ArtifactEntry, ArtifactKind, RegistryTarget

# Checked in order; the first non-empty variable wins.
GITHUB_TOKEN_VARS = ("GH_PAT_MERGER", "GITHUB_TOKEN", "GH_TOKEN")
GITEA_TOKEN_VARS = ("GITEA_PAT", "GIT_PAT", "GITEA_TOKEN")
REPOSILITE_TOKEN_VARS = ("REPOS_PAT", "REPOSILITE_PAT", "REPOSILITE_TOKEN")


@dataclass(frozen=True)
class RegistryConfig:
    """Where each registry lives and how artifacts are addressed in it."""

    github_org: str = "io-pipeline"
    gitea_base: str = "https://git.rokkon.com"
    reposilite_base: str = "https://maven.rokkon.com"
    reposilite_repository: str = "snapshots"
    maven_group: str = "io.pipeline"
    maven_version: str = "1.0.0-SNAPSHOT"
    npm_registry: str = "https://registry.npmjs.org"
    npm_site: str = "https://www.npmjs.com"


@dataclass(frozen=True)
class Credentials:
    """Bearer tokens for the authenticated registries. None means unset."""

    github: str | None
    gitea: str | None
    reposilite: str | None

    @staticmethod
    def from_env(env: Mapping[str, str]) -> "Credentials":
        """Resolve tokens through their fallback chains.

        Args:
            env: Environment mapping (usually os.environ)

        Returns:
            Credentials with each token set to the first non-empty variable
        """
        return Credentials(
            github=_first_set(env, GITHUB_TOKEN_VARS),
            gitea=_first_set(env, GITEA_TOKEN_VARS),
            reposilite=_first_set(env, REPOSILITE_TOKEN_VARS),
        )

    def for_target(self, target: RegistryTarget) -> str | None:
        if target in (RegistryTarget.GITHUB_CONTAINER, RegistryTarget.GITHUB_JAR):
            return self.github
        if target == RegistryTarget.GITEA_CONTAINER:
            return self.gitea
        if target == RegistryTarget.REPOSILITE_JAR:
            return self.reposilite
        return None


def _first_set(env: Mapping[str, str], names: tuple[str, ...]) -> str | None:
    for name in names:
        value = env.get(name, "")
        if value:
            return value
    return None


@dataclass(frozen=True)
class SweepConfig:
    """Immutable configuration for one sweep."""

    registries: RegistryConfig = field(default_factory=RegistryConfig)
    catalog: tuple[ArtifactEntry, ...] = DEFAULT_CATALOG
    timeout_seconds: float = 30.0
    max_workers: int = 1


def load_config(path: Path | None) -> SweepConfig:
    """Load sweep configuration, falling back to defaults.

    The file may contain any of these sections:

        [registries]
        github_org = "io-pipeline"

        [catalog]
        services = ["account-service"]
        libraries = ["pipeline-api"]

        [[catalog.special]]
        name = "grpc-stubs"
        project = "grpc"
        npm_package = "@io-pipeline/grpc-stubs"

        [sweep]
        timeout_seconds = 30
        max_workers = 4

    Args:
        path: TOML file to read, or None for built-in defaults

    Returns:
        SweepConfig with file values overlaid on the defaults

    Raises:
        FileNotFoundError: If path is given but does not exist
        ValueError: If the file is not valid TOML or holds malformed values
    """
    if path is None:
        return SweepConfig()

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {path}: {e}") from e

    return SweepConfig(
        registries=_parse_registries(data.get("registries", {}), path),
        catalog=_parse_catalog(data.get("catalog", {}), path),
        timeout_seconds=_parse_timeout(data.get("sweep", {}), path),
        max_workers=_parse_max_workers(data.get("sweep", {}), path),
    )


def _parse_registries(section: Any, path: Path) -> RegistryConfig:
    if not isinstance(section, dict):
        raise ValueError(f"[registries] must be a table in {path}")

    known = RegistryConfig.__dataclass_fields__.keys()
    unknown = sorted(set(section) - set(known))
    if unknown:
        raise ValueError(f"Unknown [registries] keys in {path}: {', '.join(unknown)}")

    for key, value in section.items():
        if not isinstance(value, str) or not value:
            raise ValueError(f"registries.{key} must be a non-empty string in {path}")

    # Base URLs are joined with "/" later on
    values = {
        key: value.rstrip("/") if key.endswith(("_base", "_registry", "_site")) else value
        for key, value in section.items()
    }
    return RegistryConfig(**values)


def _parse_catalog(section: Any, path: Path) -> tuple[ArtifactEntry, ...]:
    if not isinstance(section, dict):
        raise ValueError(f"[catalog] must be a table in {path}")
    if not section:
        return DEFAULT_CATALOG

    services = _string_list(section.get("services", list(DEFAULT_SERVICES)), "services", path)
    libraries = _string_list(section.get("libraries", list(DEFAULT_LIBRARIES)), "libraries", path)

    raw_specials = section.get("special")
    if raw_specials is None:
        specials: tuple[ArtifactEntry, ...] = DEFAULT_SPECIALS
    else:
        if not isinstance(raw_specials, list):
            raise ValueError(f"catalog.special must be an array of tables in {path}")
        specials = tuple(_parse_special(item, path) for item in raw_specials)

    try:
        return build_catalog(services, libraries, specials)
    except ValueError as e:
        raise ValueError(f"Invalid catalog in {path}: {e}") from e


def _parse_special(item: Any, path: Path) -> ArtifactEntry:
    if not isinstance(item, dict):
        raise ValueError(f"catalog.special entries must be tables in {path}")

    name = item.get("name")
    project = item.get("project")
    npm_package = item.get("npm_package")
    if not isinstance(name, str) or not isinstance(project, str):
        raise ValueError(f"catalog.special entries need string 'name' and 'project' in {path}")
    if npm_package is not None and not isinstance(npm_package, str):
        raise ValueError(f"catalog.special.npm_package must be a string in {path}")

    return ArtifactEntry(name, ArtifactKind.SPECIAL, project=project, npm_package=npm_package)


def _string_list(value: Any, key: str, path: Path) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"catalog.{key} must be a list of strings in {path}")
    return value


def _parse_timeout(section: Any, path: Path) -> float:
    if not isinstance(section, dict):
        raise ValueError(f"[sweep] must be a table in {path}")
    value = section.get("timeout_seconds", SweepConfig.timeout_seconds)
    if isinstance(value, bool) or not isinstance(value, int | float) or value <= 0:
        raise ValueError(f"sweep.timeout_seconds must be a positive number in {path}")
    return float(value)


def _parse_max_workers(section: Any, path: Path) -> int:
    if not isinstance(section, dict):
        raise ValueError(f"[sweep] must be a table in {path}")
    value = section.get("max_workers", SweepConfig.max_workers)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"sweep.max_workers must be a positive integer in {path}")
    return value
