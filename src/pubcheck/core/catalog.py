"""Artifact catalog and the registry targets each artifact kind requires."""

from collections.abc import Sequence

from pubcheck.core.types import ArtifactEntry, ArtifactKind, RegistryTarget

LIBRARY_GROUP = "libraries"

_SERVICE_TARGETS = (
    RegistryTarget.GITEA_CONTAINER,
    RegistryTarget.GITHUB_CONTAINER,
    RegistryTarget.REPOSILITE_JAR,
    RegistryTarget.GITHUB_JAR,
)
_MAVEN_TARGETS = (
    RegistryTarget.REPOSILITE_JAR,
    RegistryTarget.GITHUB_JAR,
)


def targets_for(entry: ArtifactEntry) -> tuple[RegistryTarget, ...]:
    """Get the registry targets an artifact must be published to, in check order."""
    if entry.kind == ArtifactKind.SERVICE:
        return _SERVICE_TARGETS
    if entry.kind == ArtifactKind.SPECIAL and entry.publishes_npm:
        return (*_MAVEN_TARGETS, RegistryTarget.NPM)
    return _MAVEN_TARGETS


def build_catalog(
    services: Sequence[str],
    libraries: Sequence[str],
    specials: Sequence[ArtifactEntry],
) -> tuple[ArtifactEntry, ...]:
    """Build an ordered catalog: services, then libraries, then special entries.

    Args:
        services: Service project names (container image + jar)
        libraries: Library sub-project names (jar only)
        specials: Pre-built SPECIAL entries, each grouped under a project

    Returns:
        Catalog entries in insertion order

    Raises:
        ValueError: If a name is empty, duplicated, or a special entry has the
            wrong kind or no project
    """
    entries: list[ArtifactEntry] = [ArtifactEntry(name, ArtifactKind.SERVICE) for name in services]
    entries.extend(ArtifactEntry(name, ArtifactKind.LIBRARY) for name in libraries)

    for special in specials:
        if special.kind != ArtifactKind.SPECIAL:
            msg = f"Special catalog entry '{special.name}' has kind {special.kind.value}"
            raise ValueError(msg)
        if not special.project:
            msg = f"Special catalog entry '{special.name}' is missing a project"
            raise ValueError(msg)
        entries.append(special)

    seen: set[str] = set()
    for entry in entries:
        if not entry.name.strip():
            raise ValueError("Catalog entry names must not be empty")
        if entry.name in seen:
            msg = f"Duplicate catalog entry: {entry.name}"
            raise ValueError(msg)
        seen.add(entry.name)

    return tuple(entries)


def special_projects(catalog: Sequence[ArtifactEntry]) -> list[str]:
    """Get special project names in first-appearance order."""
    projects: list[str] = []
    for entry in catalog:
        if entry.kind != ArtifactKind.SPECIAL or entry.project is None:
            continue
        if entry.project not in projects:
            projects.append(entry.project)
    return projects


DEFAULT_SERVICES = (
    "account-service",
    "connector-admin",
    "connector-intake-service",
    "mapping-service",
    "module-chunker",
    "module-echo",
    "module-embedder",
    "module-opensearch-sink",
    "module-parser",
    "module-pipeline-probe",
    "module-proxy",
    "opensearch-manager",
    "platform-registration-service",
)

DEFAULT_LIBRARIES = (
    "pipeline-api",
    "pipeline-commons",
    "dynamic-grpc",
    "dynamic-grpc-registration-clients",
    "data-util",
    "grpc-wiremock",
)

DEFAULT_SPECIALS = (
    ArtifactEntry(
        "grpc-stubs",
        ArtifactKind.SPECIAL,
        project="grpc",
        npm_package="@io-pipeline/grpc-stubs",
    ),
    ArtifactEntry("grpc-google-descriptor", ArtifactKind.SPECIAL, project="grpc"),
    ArtifactEntry(
        "quarkus-pipeline-devservices",
        ArtifactKind.SPECIAL,
        project="quarkus-pipeline-devservices",
    ),
)

DEFAULT_CATALOG = build_catalog(DEFAULT_SERVICES, DEFAULT_LIBRARIES, DEFAULT_SPECIALS)
