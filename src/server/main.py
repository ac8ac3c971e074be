"""FastAPI application for the tagmark compile service."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers.compile import router as compile_router
from tagmark.utils.logging_config import configure_logging

configure_logging()

app = FastAPI(title="tagmark", description="Compile tagmark markup into HTML fragments.")
app.include_router(compile_router)
