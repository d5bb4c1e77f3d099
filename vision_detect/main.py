from __future__ import annotations

import logging
import sys
from typing import TextIO

from vision_detect.core.config import settings
from vision_detect.core.logging import configure_logging
from vision_detect.pipeline.detector import Detector

logger = logging.getLogger(__name__)

USAGE = (
    "Usage:\n"
    '\tvision-detect <command> <path-to-image>\n'
    "Commands:\n"
    "\tfaces | labels | landmarks | logos | text | safe-search | properties"
    "| web | crop \n"
    "Path:\n\tA file path (ex: ./resources/wakeupcat.jpg) or a URI for a Cloud Storage "
    "resource (gs://...)\n"
)


MODES = {"text": "detect_text", "isbn": "detect_isbn", "lotto": "detect_lotto"}

# text without a path still attempts the load and raises
SKIP_WITHOUT_PATH = {"isbn", "lotto"}


def run(argv: list[str], out: TextIO, detector: Detector | None = None) -> None:
    """Dispatch one command; unknown commands are silent no-ops."""
    if len(argv) < 1:
        out.write(USAGE)
        return

    command = argv[0]
    path = argv[1] if len(argv) > 1 else ""

    if command not in MODES or (command in SKIP_WITHOUT_PATH and not path):
        logger.debug("command_ignored", extra={"command": command, "has_path": bool(path)})
        return

    if detector is None:
        detector = Detector(out=out, lotto_strategy=settings.lotto_strategy)

    getattr(detector, MODES[command])(path)


def main(argv: list[str] | None = None) -> int:
    configure_logging(settings.log_level)
    run(sys.argv[1:] if argv is None else argv, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
