"""Debug logging switch for the CLI."""

import logging
import os

DEBUG_ENV_VAR = "PUBCHECK_DEBUG"
DEBUG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


def configure_logging(debug: bool) -> None:
    """Enable debug logging when requested by flag or PUBCHECK_DEBUG."""
    if debug or os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_FORMAT)
        # Keep httpx/httpcore wire chatter out of the sweep's own debug log
        logging.getLogger("httpcore").setLevel(logging.INFO)
        logging.getLogger("httpx").setLevel(logging.INFO)
