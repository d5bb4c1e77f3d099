from __future__ import annotations

import logging

from vision_detect.annotation.base_client import AnnotationRequest, Feature

logger = logging.getLogger(__name__)

GCS_SCHEME = "gs://"


def load_image(path: str, feature: Feature = Feature.TEXT_DETECTION) -> AnnotationRequest:
    """Build the annotation request for *path*.

    Cloud Storage URIs are passed through for the service to fetch; anything
    else is read from the local filesystem. ``OSError`` propagates.
    """
    if path.startswith(GCS_SCHEME):
        logger.debug("image_uri_request", extra={"image_uri": path})
        return AnnotationRequest(image_uri=path, feature=feature)

    with open(path, "rb") as fh:
        content = fh.read()

    logger.debug("image_loaded", extra={"path": path, "size": len(content)})
    return AnnotationRequest(content=content, feature=feature)
