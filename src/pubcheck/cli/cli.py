import logging
from dataclasses import replace
from pathlib import Path

import click

from pubcheck.cli.debug import configure_logging
from pubcheck.cli.ensure import Ensure
from pubcheck.cli.output import machine_output, print_sweep_summary, user_output
from pubcheck.core.checkers import RegistryChecker
from pubcheck.core.config import load_config
from pubcheck.core.context import SweepContext, create_context
from pubcheck.core.report import render_report, report_filename
from pubcheck.core.sweep import run_sweep
from pubcheck.core.types import ArtifactEntry, ArtifactKind

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _announce(entry: ArtifactEntry) -> None:
    label = "library " if entry.kind == ArtifactKind.LIBRARY else ""
    user_output(click.style(f"Checking {label}{entry.name}...", fg="yellow"))


def _write_report(path: Path, content: str) -> None:
    """Write the report, exiting with a styled error if that is impossible."""
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.debug("Report write failed", exc_info=True)
        user_output(click.style("Error: ", fg="red") + f"Cannot write report to {path}: {e}")
        raise SystemExit(1) from e


@click.command("pubcheck", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="pubcheck")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="TOML file overriding registries, catalog and sweep settings.",
)
@click.option(
    "--output-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory for the report file (default: current directory).",
)
@click.option(
    "-j",
    "--jobs",
    type=click.IntRange(min=1),
    default=None,
    help="Run up to N checks concurrently (default: 1, or sweep.max_workers).",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Per-request timeout in seconds.",
)
@click.option("--strict", is_flag=True, help="Exit 1 unless every check passes.")
@click.option("-q", "--quiet", is_flag=True, help="Do not echo the report to stdout.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(
    click_ctx: click.Context,
    config_path: Path | None,
    output_dir: Path | None,
    jobs: int | None,
    timeout: float | None,
    strict: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """Verify that every build artifact is published to its registries.

    Checks container images, Maven jars and npm packages across Gitea, GitHub,
    Reposilite and npm, then writes a Markdown report named
    validation-report-<timestamp>.md and echoes it to stdout.

    Tokens are read from GH_PAT_MERGER/GITHUB_TOKEN/GH_TOKEN,
    GITEA_PAT/GIT_PAT/GITEA_TOKEN and REPOS_PAT/REPOSILITE_PAT/REPOSILITE_TOKEN.
    """
    configure_logging(debug)

    # Only create context if not already provided (e.g., by tests)
    if click_ctx.obj is None:
        try:
            config = load_config(config_path)
        except (FileNotFoundError, ValueError) as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e
        if timeout is not None:
            config = replace(config, timeout_seconds=timeout)
        click_ctx.obj = create_context(config)

    ctx: SweepContext = click_ctx.obj
    max_workers = jobs if jobs is not None else ctx.config.max_workers
    Ensure.invariant(max_workers >= 1, f"Worker count must be at least 1, got {max_workers}")

    target_dir = output_dir if output_dir is not None else ctx.cwd
    Ensure.directory_exists(target_dir, f"Output directory not found: {target_dir}")

    checker = RegistryChecker(
        http=ctx.http,
        github=ctx.github,
        registries=ctx.config.registries,
        credentials=ctx.credentials,
    )

    generated_at = ctx.time.now()
    try:
        result = run_sweep(
            ctx.config.catalog,
            checker,
            max_workers=max_workers,
            on_artifact=_announce,
        )
    finally:
        ctx.http.close()
    report = render_report(result, generated_at=generated_at, credentials=ctx.credentials)

    report_path = target_dir / report_filename(generated_at)
    _write_report(report_path, report)

    user_output(click.style(f"Report generated: {report_path}", fg="green"))
    if not quiet:
        machine_output(report, nl=False)
    print_sweep_summary(result.summary, str(report_path))

    if strict and result.summary.failed_checks > 0:
        raise SystemExit(1)


def main() -> None:
    """CLI entry point used by the `pubcheck` console script."""
    cli()
