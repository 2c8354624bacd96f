"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ckd_appeals.exceptions import (
    AppealsError,
    DocumentError,
    KnowledgeBaseError,
    TaskValidationError,
)

log = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(DocumentError)
    async def handle_document_error(request: Request, exc: DocumentError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc), "type": "document_error"})

    @app.exception_handler(TaskValidationError)
    async def handle_task_validation_error(request: Request, exc: TaskValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc), "type": "validation_error"})

    @app.exception_handler(KnowledgeBaseError)
    async def handle_knowledge_base_error(request: Request, exc: KnowledgeBaseError) -> JSONResponse:
        log.error("Knowledge base error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "knowledge_base_error"})

    @app.exception_handler(AppealsError)
    async def handle_generic_error(request: Request, exc: AppealsError) -> JSONResponse:
        log.error("Unhandled application error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "appeals_error"})

    @app.exception_handler(KeyError)
    async def handle_not_found(request: Request, exc: KeyError) -> JSONResponse:
        message = exc.args[0] if exc.args else "Not found"
        return JSONResponse(status_code=404, content={"error": str(message), "type": "not_found"})
