"""Lottery number extraction from text annotations.

Three strategies are available (LOTTO_STRATEGY in .env):

    log_only  echo every annotation and never match (default)
    pattern   return the first annotation whose text matches LOTTO_PATTERN
    joined    match LOTTO_PATTERN against all annotation texts joined by spaces
"""
from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from enum import Enum
from typing import TextIO

from vision_detect.annotation.base_client import TextAnnotation

logger = logging.getLogger(__name__)

# Five space separated two-digit numbers, then a sixth one after arbitrary text
LOTTO_PATTERN = re.compile(r"(\d{2}\s){4}\d{2}.*\d{2}")

NOT_FOUND_MESSAGE = "Detect didn't find anything that looks like lotto numbers!"


class LotteryStrategy(str, Enum):
    LOG_ONLY = "log_only"
    PATTERN_MATCHING = "pattern"
    JOINED = "joined"


class LotteryExtractor:
    def __init__(self, strategy: LotteryStrategy | str = LotteryStrategy.LOG_ONLY) -> None:
        try:
            self.strategy = LotteryStrategy(strategy)
        except ValueError as exc:
            raise ValueError(f"Unknown LOTTO_STRATEGY={strategy!r}") from exc

    def extract(self, annotations: Sequence[TextAnnotation], out: TextIO) -> str | None:
        if self.strategy is LotteryStrategy.PATTERN_MATCHING:
            found = self._match_each(annotations, out)
        elif self.strategy is LotteryStrategy.JOINED:
            found = self._match_joined(annotations, out)
        else:
            found = self._log_only(annotations, out)

        if found is None:
            logger.info(
                "lotto_not_found",
                extra={"strategy": self.strategy.value, "annotations": len(annotations)},
            )
            out.write(NOT_FOUND_MESSAGE + "\n")
        return found

    def _log_only(self, annotations: Sequence[TextAnnotation], out: TextIO) -> str | None:
        for annotation in annotations:
            out.write(f"Detect returns:{annotation.text}\n")
        return None

    def _match_each(self, annotations: Sequence[TextAnnotation], out: TextIO) -> str | None:
        for annotation in annotations:
            if LOTTO_PATTERN.search(annotation.text):
                out.write(f"Detect returns:{annotation.text}\n")
                return annotation.text
        return None

    def _match_joined(self, annotations: Sequence[TextAnnotation], out: TextIO) -> str | None:
        joined = " ".join(a.text for a in annotations)
        match = LOTTO_PATTERN.search(joined)
        if not match:
            return None
        out.write(f"Detect returns:{match.group(0)}\n")
        return match.group(0)
