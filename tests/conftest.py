"""Shared pytest configuration and fixtures for vision-detect tests."""
from __future__ import annotations

import os

# Provide env vars before any vision_detect module is imported
os.environ.setdefault("ANNOTATOR_PROVIDER", "mock")
os.environ.setdefault("LOTTO_STRATEGY", "log_only")
os.environ.setdefault("LOG_LEVEL", "WARNING")
