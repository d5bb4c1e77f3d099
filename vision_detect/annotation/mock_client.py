from __future__ import annotations

from collections.abc import Sequence

from vision_detect.annotation.base_client import (
    AnnotationClient,
    AnnotationRequest,
    AnnotationResult,
    BoundingPoly,
    TextAnnotation,
    Vertex,
)


def _box(x1: int, y1: int, x2: int, y2: int) -> BoundingPoly:
    return BoundingPoly(
        vertices=(Vertex(x1, y1), Vertex(x2, y1), Vertex(x2, y2), Vertex(x1, y2))
    )


DEFAULT_ANNOTATIONS: tuple[TextAnnotation, ...] = (
    TextAnnotation("ISBN 978-0-13-468599-1", _box(10, 10, 220, 30)),
    TextAnnotation("ISBN", _box(10, 10, 50, 30)),
    TextAnnotation("978-0-13-468599-1", _box(60, 10, 220, 30)),
)


class MockAnnotationClient(AnnotationClient):
    """In-memory client for development and tests; never touches the network."""

    def __init__(
        self,
        annotations: Sequence[TextAnnotation] | None = None,
        error: str | None = None,
    ) -> None:
        self._annotations = tuple(DEFAULT_ANNOTATIONS if annotations is None else annotations)
        self._error = error
        self.requests: list[AnnotationRequest] = []
        self.is_open = False
        self.close_count = 0

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False
        self.close_count += 1

    def annotate(self, request: AnnotationRequest) -> AnnotationResult:
        self.requests.append(request)
        if self._error:
            return AnnotationResult(error=self._error)
        return AnnotationResult(annotations=self._annotations)
