"""Parsing helpers for gh CLI error output."""

import re

from pubcheck.core.github.types import PackageStatus

_HTTP_STATUS_RE = re.compile(r"\(HTTP (\d{3})\)")


def classify_gh_api_error(message: str) -> PackageStatus:
    """Map a failed `gh api` call to a PackageStatus.

    gh reports API failures on stderr as e.g. "gh: Not Found (HTTP 404)".
    A gh with no stored login asks the user to run `gh auth login`.

    Args:
        message: Error message carrying gh's stderr

    Returns:
        "UNAUTHORIZED" for HTTP 401/403 or a missing login, else "NOT_FOUND"
    """
    if "gh auth login" in message:
        return "UNAUTHORIZED"

    match = _HTTP_STATUS_RE.search(message)
    if match is not None and match.group(1) in ("401", "403"):
        return "UNAUTHORIZED"

    return "NOT_FOUND"
