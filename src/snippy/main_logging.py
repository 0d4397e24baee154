"""Logging configuration for the snippy CLI."""
import logging


def configure_logging(verbose: bool, quiet: bool = False) -> None:
    """Configure logging level based on verbosity settings.

    Args:
        verbose: If True, set DEBUG level.
        quiet: If True, set WARNING level. Per-file reports are hidden.

    INFO is the default so that every written or failed file is reported.
    Errors are always printed to stderr regardless of verbosity.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        handlers=[logging.StreamHandler()],
    )
