"""Logging configuration for the maid command line."""

import logging
import sys


class _ThirdPartyFilter(logging.Filter):
    """Keep maid's own records; let other libraries through only at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "maid" or record.name.startswith("maid."):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr.

    Call this once, before the first command runs. Without ``verbose`` only
    warnings and errors are shown so command output stays clean.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Remove any pre-existing handlers to avoid duplicates.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handler.addFilter(_ThirdPartyFilter())
    root.addHandler(handler)

    logging.captureWarnings(True)
