"""Sweep driver: run every applicable check and fold the results."""

import logging
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from pubcheck.core.catalog import targets_for
from pubcheck.core.checkers import RegistryChecker
from pubcheck.core.types import (
    ArtifactEntry,
    CheckResult,
    RegistryTarget,
    ReportRow,
    RunSummary,
    SweepResult,
)

logger = logging.getLogger(__name__)


def plan_checks(catalog: Sequence[ArtifactEntry]) -> list[tuple[ArtifactEntry, RegistryTarget]]:
    """List every (artifact, target) pair to check, in catalog order."""
    return [(entry, target) for entry in catalog for target in targets_for(entry)]


def summarize(results: Iterable[CheckResult]) -> RunSummary:
    """Fold check results into pass/fail counts."""
    total = 0
    passed = 0
    for result in results:
        total += 1
        if result.exists:
            passed += 1
    return RunSummary(total_checks=total, passed_checks=passed)


def group_rows(
    catalog: Sequence[ArtifactEntry], results: Sequence[CheckResult]
) -> tuple[ReportRow, ...]:
    """Group results into one row per catalog entry, preserving catalog order."""
    by_artifact: dict[str, list[CheckResult]] = {entry.name: [] for entry in catalog}
    for result in results:
        by_artifact[result.artifact.name].append(result)
    return tuple(ReportRow(entry, tuple(by_artifact[entry.name])) for entry in catalog)


def run_sweep(
    catalog: Sequence[ArtifactEntry],
    checker: RegistryChecker,
    *,
    max_workers: int = 1,
    on_artifact: Callable[[ArtifactEntry], None] | None = None,
) -> SweepResult:
    """Check every catalog entry against its applicable targets.

    Checks are independent, so with max_workers > 1 they run on a bounded
    thread pool. Results are always reassembled in catalog order.

    Args:
        catalog: Artifacts to check
        checker: Registry checker; its check() never raises
        max_workers: Upper bound on concurrent checks (1 = sequential)
        on_artifact: Progress hook called once per artifact

    Returns:
        SweepResult with rows in catalog order and the folded summary
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    planned = plan_checks(catalog)
    logger.debug("Planned %d checks for %d artifacts", len(planned), len(catalog))

    if max_workers == 1:
        results: list[CheckResult] = []
        for entry in catalog:
            if on_artifact is not None:
                on_artifact(entry)
            results.extend(checker.check(entry, target) for target in targets_for(entry))
    else:
        if on_artifact is not None:
            for entry in catalog:
                on_artifact(entry)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            # map() yields in submission order regardless of completion order
            results = list(executor.map(lambda pair: checker.check(*pair), planned))

    return SweepResult(rows=group_rows(catalog, results), summary=summarize(results))
