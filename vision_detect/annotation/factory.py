from __future__ import annotations

from vision_detect.annotation.base_client import AnnotationClient
from vision_detect.annotation.mock_client import MockAnnotationClient
from vision_detect.core.config import Settings, settings


def get_annotation_client(config: Settings | None = None) -> AnnotationClient:
    """Return the configured annotation client instance.

    ANNOTATOR_PROVIDER options:
        google_vision — GoogleVisionClient (pip install google-cloud-vision + credentials)
        mock          — canned annotations (dev/test, no deps required)
    """
    config = config or settings
    provider = config.annotator_provider.lower().strip()

    if provider == "mock":
        return MockAnnotationClient()

    if provider == "google_vision":
        from vision_detect.annotation.google_vision import GoogleVisionClient
        return GoogleVisionClient(
            endpoint=config.vision_api_endpoint,
            timeout_seconds=config.vision_timeout_seconds,
        )

    raise ValueError(f"Unknown ANNOTATOR_PROVIDER={config.annotator_provider!r}")
