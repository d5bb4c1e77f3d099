"""Annotation client backed by Google Cloud Vision.

Install dependency:
    pip install google-cloud-vision

Config (via .env):
    ANNOTATOR_PROVIDER=google_vision
    VISION_API_ENDPOINT=eu-vision.googleapis.com   # optional
    VISION_TIMEOUT_SECONDS=30                      # optional
    GOOGLE_APPLICATION_CREDENTIALS=/path/to/key.json
"""
from __future__ import annotations

import logging
from typing import Any

from vision_detect.annotation.base_client import (
    AnnotationClient,
    AnnotationRequest,
    AnnotationResult,
    BoundingPoly,
    TextAnnotation,
    Vertex,
)

logger = logging.getLogger(__name__)


def _to_bounding_poly(poly: Any) -> BoundingPoly:
    vertices = getattr(poly, "vertices", None) or []
    return BoundingPoly(
        vertices=tuple(
            Vertex(x=int(getattr(v, "x", 0) or 0), y=int(getattr(v, "y", 0) or 0))
            for v in vertices
        )
    )


def normalize_response(batch_response: Any) -> AnnotationResult:
    """Flatten a BatchAnnotateImagesResponse into an AnnotationResult.

    The first per-image error wins; otherwise text annotations are kept in
    the order the service returned them.
    """
    annotations: list[TextAnnotation] = []
    for res in batch_response.responses:
        error = getattr(res, "error", None)
        code = getattr(error, "code", 0) or 0
        message = getattr(error, "message", "") or ""
        if code or message:
            return AnnotationResult(error=message or f"status code {code}")

        for annotation in res.text_annotations:
            annotations.append(
                TextAnnotation(
                    text=annotation.description,
                    bounding_poly=_to_bounding_poly(annotation.bounding_poly),
                )
            )
    return AnnotationResult(annotations=tuple(annotations))


class GoogleVisionClient(AnnotationClient):
    def __init__(self, *, endpoint: str | None = None, timeout_seconds: float | None = None) -> None:
        try:
            from google.cloud import vision  # type: ignore[import]
        except ModuleNotFoundError as exc:
            raise RuntimeError(
                "google-cloud-vision is not installed. Run: pip install google-cloud-vision"
            ) from exc

        self._vision = vision
        self._endpoint = endpoint
        self._timeout_seconds = timeout_seconds
        self._client = None

    def open(self) -> None:
        client_options = {"api_endpoint": self._endpoint} if self._endpoint else None
        self._client = self._vision.ImageAnnotatorClient(client_options=client_options)

    def close(self) -> None:
        if self._client is not None:
            self._client.transport.close()
            self._client = None

    def _build_request(self, request: AnnotationRequest) -> Any:
        vision = self._vision
        if request.image_uri:
            image = vision.Image(source=vision.ImageSource(image_uri=request.image_uri))
        else:
            image = vision.Image(content=request.content)
        feature = vision.Feature(type_=vision.Feature.Type[request.feature.value])
        return vision.AnnotateImageRequest(image=image, features=[feature])

    def annotate(self, request: AnnotationRequest) -> AnnotationResult:
        if self._client is None:
            raise RuntimeError("GoogleVisionClient must be used as a context manager")

        kwargs: dict[str, Any] = {"requests": [self._build_request(request)]}
        if self._timeout_seconds is not None:
            kwargs["timeout"] = self._timeout_seconds

        response = self._client.batch_annotate_images(**kwargs)
        result = normalize_response(response)

        logger.info(
            "annotation_complete",
            extra={
                "feature": request.feature.value,
                "annotations": len(result.annotations),
                "error": result.error,
            },
        )
        return result
