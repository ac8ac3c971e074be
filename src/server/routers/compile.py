"""Compile endpoint for the API."""

from __future__ import annotations

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from server.compile_processor import process_compile
from server.models import CompileErrorResponse, CompileRequest, CompileSuccessResponse

router = APIRouter()

_UNPROCESSABLE_STATUS = 422

COMMON_COMPILE_RESPONSES: dict[int | str, dict] = {
    status.HTTP_200_OK: {"model": CompileSuccessResponse, "description": "Document compiled"},
    _UNPROCESSABLE_STATUS: {
        "model": CompileErrorResponse,
        "description": "Syntax or validation errors in the document",
    },
}


@router.post("/api/compile", responses=COMMON_COMPILE_RESPONSES)
async def api_compile(
    request: Request,  # noqa: ARG001 (unused-function-argument) # pylint: disable=unused-argument
    compile_request: CompileRequest,
) -> JSONResponse:
    """Compile a tagmark document into an HTML fragment.

    **Parameters**

    - **compile_request** (`CompileRequest`): document source and rendering flags

    **Returns**

    - **JSONResponse**: the rendered HTML, or every diagnostic with status **422**

    """
    response = process_compile(
        compile_request.source,
        escape_text=compile_request.escape_text,
        include_tree=compile_request.include_tree,
    )
    if isinstance(response, CompileErrorResponse):
        return JSONResponse(
            status_code=_UNPROCESSABLE_STATUS,
            content=response.model_dump(mode="json"),
        )
    return JSONResponse(content=response.model_dump(mode="json", exclude_none=True))


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
