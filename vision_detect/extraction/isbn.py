"""ISBN extraction from text annotations.

The service emits the full text block first and then one annotation per
token in reading order, so the ISBN value is the token right after the
literal ``ISBN`` label.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from vision_detect.annotation.base_client import TextAnnotation

logger = logging.getLogger(__name__)

ISBN_LABEL = "isbn"


class ScanState(Enum):
    SEARCHING = "searching"
    ARMED = "armed"


def _is_label(text: str) -> bool:
    return text.strip().lower() == ISBN_LABEL


class IsbnExtractor:
    def extract(self, annotations: Iterable[TextAnnotation]) -> str | None:
        """Return the text following the first ``ISBN`` token, or None.

        End of input is terminal in both states: a trailing ``ISBN`` label
        yields None rather than an empty value.
        """
        state = ScanState.SEARCHING
        for annotation in annotations:
            if state is ScanState.ARMED:
                logger.info("isbn_found", extra={"isbn": annotation.text})
                return annotation.text
            if _is_label(annotation.text):
                state = ScanState.ARMED

        logger.info("isbn_not_found", extra={"final_state": state.value})
        return None
