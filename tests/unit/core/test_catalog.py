"""Tests for the artifact catalog and per-kind target rules."""

import pytest

from pubcheck.core.catalog import (
    DEFAULT_CATALOG,
    build_catalog,
    special_projects,
    targets_for,
)
from pubcheck.core.types import ArtifactEntry, ArtifactKind, RegistryTarget


def test_service_requires_four_non_npm_targets() -> None:
    entry = ArtifactEntry("alpha", ArtifactKind.SERVICE)

    assert targets_for(entry) == (
        RegistryTarget.GITEA_CONTAINER,
        RegistryTarget.GITHUB_CONTAINER,
        RegistryTarget.REPOSILITE_JAR,
        RegistryTarget.GITHUB_JAR,
    )


def test_library_requires_maven_targets_only() -> None:
    entry = ArtifactEntry("beta", ArtifactKind.LIBRARY)

    assert targets_for(entry) == (RegistryTarget.REPOSILITE_JAR, RegistryTarget.GITHUB_JAR)


def test_npm_bearing_special_adds_npm_target() -> None:
    entry = ArtifactEntry(
        "grpc-stubs", ArtifactKind.SPECIAL, project="grpc", npm_package="@io-pipeline/grpc-stubs"
    )

    assert targets_for(entry) == (
        RegistryTarget.REPOSILITE_JAR,
        RegistryTarget.GITHUB_JAR,
        RegistryTarget.NPM,
    )


def test_plain_special_requires_maven_targets_only() -> None:
    entry = ArtifactEntry("grpc-google-descriptor", ArtifactKind.SPECIAL, project="grpc")

    assert targets_for(entry) == (RegistryTarget.REPOSILITE_JAR, RegistryTarget.GITHUB_JAR)


def test_default_catalog_counts() -> None:
    kinds = [entry.kind for entry in DEFAULT_CATALOG]

    assert kinds.count(ArtifactKind.SERVICE) == 13
    assert kinds.count(ArtifactKind.LIBRARY) == 6
    assert kinds.count(ArtifactKind.SPECIAL) == 3
    assert sum(len(targets_for(entry)) for entry in DEFAULT_CATALOG) == 71


def test_default_catalog_order_is_services_libraries_specials() -> None:
    assert DEFAULT_CATALOG[0].name == "account-service"
    assert DEFAULT_CATALOG[13].name == "pipeline-api"
    assert [entry.name for entry in DEFAULT_CATALOG[-3:]] == [
        "grpc-stubs",
        "grpc-google-descriptor",
        "quarkus-pipeline-devservices",
    ]


def test_default_catalog_has_exactly_one_npm_entry() -> None:
    npm_entries = [entry for entry in DEFAULT_CATALOG if entry.publishes_npm]

    assert [entry.name for entry in npm_entries] == ["grpc-stubs"]
    assert npm_entries[0].npm_package == "@io-pipeline/grpc-stubs"


def test_build_catalog_preserves_insertion_order() -> None:
    catalog = build_catalog(
        ["zeta", "alpha"],
        ["mu"],
        [ArtifactEntry("stubs", ArtifactKind.SPECIAL, project="rpc")],
    )

    assert [entry.name for entry in catalog] == ["zeta", "alpha", "mu", "stubs"]
    assert [entry.kind for entry in catalog] == [
        ArtifactKind.SERVICE,
        ArtifactKind.SERVICE,
        ArtifactKind.LIBRARY,
        ArtifactKind.SPECIAL,
    ]


def test_build_catalog_rejects_duplicates() -> None:
    with pytest.raises(ValueError, match="Duplicate catalog entry: alpha"):
        build_catalog(["alpha"], ["alpha"], [])


def test_build_catalog_rejects_empty_names() -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        build_catalog(["  "], [], [])


def test_build_catalog_rejects_special_without_project() -> None:
    with pytest.raises(ValueError, match="missing a project"):
        build_catalog([], [], [ArtifactEntry("stubs", ArtifactKind.SPECIAL)])


def test_build_catalog_rejects_non_special_in_specials() -> None:
    with pytest.raises(ValueError, match="has kind library"):
        build_catalog([], [], [ArtifactEntry("stubs", ArtifactKind.LIBRARY, project="rpc")])


def test_special_projects_in_first_appearance_order() -> None:
    assert special_projects(DEFAULT_CATALOG) == ["grpc", "quarkus-pipeline-devservices"]
