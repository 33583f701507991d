"""Root logger setup for command-line use"""

import logging


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Route distillmd log records to stderr at the given level."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
