from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout stays reserved for command output."""
    logging.basicConfig(level=level.upper(), format=_FORMAT, stream=sys.stderr)
