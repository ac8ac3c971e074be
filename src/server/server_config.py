"""Configuration for the tagmark HTTP server."""

from __future__ import annotations

import os

from tagmark.config import TAGMARK_MAX_INPUT_BYTES

# Upper bound on submitted source length, in characters.
MAX_SOURCE_CHARS = int(os.getenv("TAGMARK_MAX_SOURCE_CHARS", str(TAGMARK_MAX_INPUT_BYTES)))
