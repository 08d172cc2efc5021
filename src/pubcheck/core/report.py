"""Markdown rendering of sweep results."""

from datetime import datetime

from pubcheck.core.catalog import LIBRARY_GROUP, special_projects
from pubcheck.core.config import Credentials
from pubcheck.core.types import (
    ArtifactKind,
    CheckResult,
    RegistryTarget,
    ReportRow,
    SweepResult,
)

PASS = "✅"
FAIL = "❌"
NOT_APPLICABLE = "N/A"


def report_filename(generated_at: datetime) -> str:
    """Get the report file name for a run started at generated_at."""
    return f"validation-report-{generated_at:%Y%m%d-%H%M%S}.md"


def status_glyph(ok: bool) -> str:
    return PASS if ok else FAIL


def link_cell(result: CheckResult | None) -> str:
    """Render one check as a status glyph linking to the checked URL."""
    if result is None:
        return NOT_APPLICABLE
    return f"{status_glyph(result.exists)} [link]({result.url})"


def _table(headers: list[str], rows: list[list[str]]) -> list[str]:
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("-" * (len(header) + 2) for header in headers) + "|",
    ]
    lines.extend("| " + " | ".join(row) + " |" for row in rows)
    return lines


def _service_section(result: SweepResult) -> list[str]:
    rows = [
        [
            row.artifact.name,
            link_cell(row.result_for(RegistryTarget.GITEA_CONTAINER)),
            link_cell(row.result_for(RegistryTarget.GITHUB_CONTAINER)),
            link_cell(row.result_for(RegistryTarget.REPOSILITE_JAR)),
            link_cell(row.result_for(RegistryTarget.GITHUB_JAR)),
            status_glyph(row.complete),
        ]
        for row in result.rows_of_kind(ArtifactKind.SERVICE)
    ]

    # Pointer rows for artifacts detailed in their own sections
    pointers = special_projects([row.artifact for row in result.rows])
    if result.rows_of_kind(ArtifactKind.LIBRARY):
        pointers.append(LIBRARY_GROUP)
    for name in sorted(pointers):
        rows.append([f"**{name}**", NOT_APPLICABLE, NOT_APPLICABLE] + ["See below"] * 3)

    headers = [
        "Repository",
        "Gitea Container",
        "GitHub Container",
        "Reposilite JAR",
        "GitHub JAR",
        "Complete?",
    ]
    return ["## Summary", "", *_table(headers, rows)]


def _library_section(result: SweepResult) -> list[str]:
    rows = [
        [
            row.artifact.name,
            link_cell(row.result_for(RegistryTarget.REPOSILITE_JAR)),
            link_cell(row.result_for(RegistryTarget.GITHUB_JAR)),
            status_glyph(row.complete),
        ]
        for row in result.rows_of_kind(ArtifactKind.LIBRARY)
    ]
    headers = ["Library", "Reposilite JAR", "GitHub JAR", "Complete?"]
    return ["## Library Sub-Projects", "", *_table(headers, rows)]


def _special_project_table(project: str, rows: list[ReportRow]) -> list[str]:
    with_npm = any(row.artifact.publishes_npm for row in rows)

    headers = ["Artifact", "Reposilite", "GitHub Maven"]
    if with_npm:
        headers.append("NPM")
    headers.append("Complete?")

    cells: list[list[str]] = []
    for row in rows:
        line = [
            row.artifact.name,
            link_cell(row.result_for(RegistryTarget.REPOSILITE_JAR)),
            link_cell(row.result_for(RegistryTarget.GITHUB_JAR)),
        ]
        if with_npm:
            line.append(link_cell(row.result_for(RegistryTarget.NPM)))
        line.append(status_glyph(row.complete))
        cells.append(line)

    heading = f"### {project} Project" if with_npm else f"### {project} (Maven Project)"
    return [heading, "", *_table(headers, cells)]


def _special_section(result: SweepResult) -> list[str]:
    special_rows = result.rows_of_kind(ArtifactKind.SPECIAL)
    lines = ["## Special Projects"]
    for project in special_projects([row.artifact for row in special_rows]):
        project_rows = [row for row in special_rows if row.artifact.project == project]
        lines.extend(["", *_special_project_table(project, project_rows)])
    return lines


def _statistics_section(result: SweepResult) -> list[str]:
    summary = result.summary
    return [
        "## Overall Statistics",
        "",
        f"- **Total Checks**: {summary.total_checks}",
        f"- **Passed**: {summary.passed_checks}",
        f"- **Failed**: {summary.failed_checks}",
        f"- **Success Rate**: {summary.success_rate}%",
    ]


def _credentials_section(credentials: Credentials) -> list[str]:
    def provided(token: str | None) -> str:
        return f"{PASS} Provided" if token else f"{FAIL} Missing"

    return [
        "## Authentication Tokens Used",
        "",
        f"- **GitHub Token**: {provided(credentials.github)}",
        f"- **Gitea Token**: {provided(credentials.gitea)}",
        f"- **Reposilite Token**: {provided(credentials.reposilite)}",
    ]


def render_report(
    result: SweepResult, *, generated_at: datetime, credentials: Credentials
) -> str:
    """Render a sweep as a Markdown report.

    Output is fully determined by the arguments: the same results, timestamp
    and credential presence always render the same text.

    Args:
        result: Completed sweep
        generated_at: Time the sweep ran, shown in the header
        credentials: Used only to report which tokens were present

    Returns:
        Markdown document ending in a newline
    """
    sections = [
        [
            "# Published Assets Validation Report",
            "",
            f"Generated: {generated_at:%Y-%m-%d %H:%M:%S}",
        ],
        [
            "## Legend",
            f"- {PASS} = Asset found and accessible",
            f"- {FAIL} = Asset not found or not accessible",
            f"- {NOT_APPLICABLE} = Not applicable for this project type",
        ],
        _service_section(result),
        _library_section(result),
        _special_section(result),
        _statistics_section(result),
        _credentials_section(credentials),
        ["---", "*Generated by pubcheck*"],
    ]
    return "\n\n".join("\n".join(section) for section in sections) + "\n"
