"""Detection pipeline — orchestrates image loading → annotation → post-processing.

Each mode runs exactly one request/response cycle. The image is read before a
client is acquired, and the client is released when the cycle ends on every
path.
"""
from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from vision_detect.annotation.base_client import (
    AnnotationClient,
    AnnotationResult,
    Feature,
    RequestError,
)
from vision_detect.annotation.factory import get_annotation_client
from vision_detect.annotation.image_loader import load_image
from vision_detect.extraction.isbn import IsbnExtractor
from vision_detect.extraction.lotto import LotteryExtractor, LotteryStrategy

logger = logging.getLogger(__name__)


class Detector:
    def __init__(
        self,
        client_factory: Callable[[], AnnotationClient] = get_annotation_client,
        *,
        out: TextIO | None = None,
        err: TextIO | None = None,
        lotto_strategy: LotteryStrategy | str = LotteryStrategy.LOG_ONLY,
    ) -> None:
        self._client_factory = client_factory
        self._out = out if out is not None else sys.stdout
        self._err = err if err is not None else sys.stderr
        self._isbn_extractor = IsbnExtractor()
        self._lotto_extractor = LotteryExtractor(lotto_strategy)

    # ------------------------------------------------------------------ #
    #  Modes                                                              #
    # ------------------------------------------------------------------ #

    def detect_text(self, path: str) -> None:
        """Write every annotation's text and bounding polygon to the output stream."""
        result = self._annotate(path)
        if not result.ok:
            self._out.write(f"Error: {result.error}\n")
            return

        for annotation in result.annotations:
            self._out.write(f"Text: {annotation.text}\n")
            self._out.write(f"Position : {annotation.bounding_poly}\n")

    def detect_isbn(self, path: str) -> str | None:
        result = self._checked_annotate(path)
        isbn = self._isbn_extractor.extract(result.annotations)
        if isbn is not None:
            self._out.write(f"return:{isbn}\n")
        return isbn

    def detect_lotto(self, path: str) -> str | None:
        result = self._checked_annotate(path)
        return self._lotto_extractor.extract(result.annotations, self._out)

    # ------------------------------------------------------------------ #
    #  Request cycle                                                      #
    # ------------------------------------------------------------------ #

    def _annotate(self, path: str) -> AnnotationResult:
        request = load_image(path, Feature.TEXT_DETECTION)
        with self._client_factory() as client:
            result = client.annotate(request)

        logger.info(
            "annotate_complete",
            extra={"path": path, "annotations": len(result.annotations), "ok": result.ok},
        )
        return result

    def _checked_annotate(self, path: str) -> AnnotationResult:
        result = self._annotate(path)
        if not result.ok:
            logger.info("annotate_failed", extra={"path": path, "error": result.error})
            self._err.write(f"Error: {result.error}\n")
            raise RequestError(result.error)
        return result
