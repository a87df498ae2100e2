# ABOUTME: Logging setup for the command line interface
# ABOUTME: Maps cleo verbosity flags and the debug variable onto log levels

"""Logging configuration for CLI commands."""

import logging
import os
import sys

DEBUG_ENV = "COGNITO_SSM_SYNC_DEBUG"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbosity: int = 0) -> int:
    """Configure root logging once per command run.

    Args:
        verbosity: 0 for warnings, 1 for info, 2 or more for debug

    Returns:
        The level that was applied
    """
    if os.environ.get(DEBUG_ENV, "").lower() in ("true", "1", "yes", "y"):
        verbosity = 2

    level = logging.WARNING
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[logging.StreamHandler(sys.stderr)], force=True)

    # botocore is very chatty at DEBUG
    logging.getLogger("botocore").setLevel(max(level, logging.INFO))
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))
    return level


def verbosity_from_io(io) -> int:
    """Map cleo's -v/-vv/-vvv flags onto configure_logging verbosity."""
    if io.is_debug() or io.is_very_verbose():
        return 2
    if io.is_verbose():
        return 1
    return 0
