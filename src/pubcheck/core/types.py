"""Type definitions for publish verification sweeps."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

# Why a check came back negative. Informational only: `exists` is the contract.
FailureReason = Literal["not-found", "unauthorized", "network", "unavailable"]


class ArtifactKind(Enum):
    """How an artifact is built and therefore where it should be published."""

    SERVICE = "service"  # container image + jar
    LIBRARY = "library"  # jar only
    SPECIAL = "special"  # jar, optionally an npm package


class RegistryTarget(Enum):
    """One hosting destination an artifact can be published to."""

    GITEA_CONTAINER = "gitea-container"
    GITHUB_CONTAINER = "github-container"
    REPOSILITE_JAR = "reposilite-jar"
    GITHUB_JAR = "github-jar"
    NPM = "npm"


@dataclass(frozen=True)
class ArtifactEntry:
    """A named build artifact from the catalog.

    project and npm_package are only meaningful for SPECIAL entries: project
    groups artifacts in the report, npm_package marks the entry as also
    published to the npm registry.
    """

    name: str
    kind: ArtifactKind
    project: str | None = None
    npm_package: str | None = None

    @property
    def publishes_npm(self) -> bool:
        return self.npm_package is not None


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one existence check for an (artifact, target) pair."""

    artifact: ArtifactEntry
    target: RegistryTarget
    url: str
    exists: bool
    failure: FailureReason | None = None


@dataclass(frozen=True)
class ReportRow:
    """All check results for one artifact, in target order."""

    artifact: ArtifactEntry
    results: tuple[CheckResult, ...]

    @property
    def complete(self) -> bool:
        """True iff every applicable check passed.

        An artifact with no applicable checks is vacuously complete.
        """
        return all(result.exists for result in self.results)

    def result_for(self, target: RegistryTarget) -> CheckResult | None:
        for result in self.results:
            if result.target == target:
                return result
        return None


@dataclass(frozen=True)
class RunSummary:
    """Pass/fail counts folded over every check of a sweep."""

    total_checks: int
    passed_checks: int

    @property
    def failed_checks(self) -> int:
        return self.total_checks - self.passed_checks

    @property
    def success_rate(self) -> int:
        """Percentage of passed checks, truncated toward zero.

        Returns 0 when no checks ran.
        """
        if self.total_checks == 0:
            return 0
        return self.passed_checks * 100 // self.total_checks


@dataclass(frozen=True)
class SweepResult:
    """Everything a sweep produced, with rows in catalog order."""

    rows: tuple[ReportRow, ...]
    summary: RunSummary

    def rows_of_kind(self, kind: ArtifactKind) -> list[ReportRow]:
        return [row for row in self.rows if row.artifact.kind == kind]
