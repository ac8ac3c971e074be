"""Local configuration for tagmark."""

from __future__ import annotations

import os


DEFAULT_MAX_INPUT_BYTES = 1024 * 1024
DEFAULT_READ_CHUNK_SIZE = 512
DEFAULT_MAX_DEPTH = 100
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "tagmark/0.1"
DEFAULT_LOG_LEVEL = "WARNING"

# Hard ceiling on the bytes consumed by any single document read.
TAGMARK_MAX_INPUT_BYTES = int(os.getenv("TAGMARK_MAX_INPUT_BYTES", str(DEFAULT_MAX_INPUT_BYTES)))
TAGMARK_READ_CHUNK_SIZE = int(os.getenv("TAGMARK_READ_CHUNK_SIZE", str(DEFAULT_READ_CHUNK_SIZE)))
TAGMARK_MAX_DEPTH = int(os.getenv("TAGMARK_MAX_DEPTH", str(DEFAULT_MAX_DEPTH)))
TAGMARK_FETCH_TIMEOUT_S = float(os.getenv("TAGMARK_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
TAGMARK_FETCH_MAX_RETRIES = int(os.getenv("TAGMARK_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
TAGMARK_FETCH_BACKOFF_S = float(os.getenv("TAGMARK_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
TAGMARK_USER_AGENT = os.getenv("TAGMARK_USER_AGENT", DEFAULT_USER_AGENT)
TAGMARK_LOG_LEVEL = os.getenv("TAGMARK_LOG_LEVEL", DEFAULT_LOG_LEVEL)
