"""Compilation output model."""

from __future__ import annotations

from pydantic import BaseModel


class CompileResult(BaseModel):
    """Final compilation output."""

    html: str
    tree: str
