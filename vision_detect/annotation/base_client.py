from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Feature(str, Enum):
    TEXT_DETECTION = "TEXT_DETECTION"


class RequestError(RuntimeError):
    """The annotation service reported an error for the submitted image."""

    def __init__(self, message: str) -> None:
        super().__init__(f"ERROR:{message}")
        self.message = message


@dataclass(frozen=True)
class Vertex:
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class BoundingPoly:
    vertices: tuple[Vertex, ...] = ()

    def __str__(self) -> str:
        return " ".join(f"({v.x}, {v.y})" for v in self.vertices)


@dataclass(frozen=True)
class TextAnnotation:
    text: str
    bounding_poly: BoundingPoly = BoundingPoly()


@dataclass(frozen=True)
class AnnotationRequest:
    content: bytes | None = None
    image_uri: str | None = None
    feature: Feature = Feature.TEXT_DETECTION


@dataclass(frozen=True)
class AnnotationResult:
    annotations: tuple[TextAnnotation, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return not self.error


class AnnotationClient:
    """Single-image annotation capability.

    Clients are context managers: the underlying connection is opened on
    enter and released on exit, whether or not the request succeeded.
    """

    def open(self) -> None:
        pass

    def close(self) -> None:
        pass

    def annotate(self, request: AnnotationRequest) -> AnnotationResult:
        raise NotImplementedError

    def __enter__(self) -> AnnotationClient:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
