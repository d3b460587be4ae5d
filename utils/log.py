"""
Root logger configuration, applied once at process startup.

Usage:
    import logging
    logger = logging.getLogger(__name__)
    logger.info("Loan created id=%s", loan.id)
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Send records to stderr at the given level. Safe to call more than once."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
