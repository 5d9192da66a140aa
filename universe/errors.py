from __future__ import annotations

from typing import Any, Tuple, Type

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


def install_error_handlers(
    app: FastAPI, *, domain_errors: Tuple[Type[Exception], ...] = ()
) -> None:
    """Answer validation failures and domain errors with 400 and a short error body."""

    async def _invalid_input(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse({"error": "Invalid input."}, status_code=400)

    async def _domain_error(request: Request, exc: Exception) -> JSONResponse:
        payload: dict[str, Any] = {"error": str(exc)}
        kind = getattr(exc, "kind", None)
        if kind:
            payload["kind"] = kind
        return JSONResponse(payload, status_code=400)

    app.add_exception_handler(RequestValidationError, _invalid_input)
    for error_type in domain_errors:
        app.add_exception_handler(error_type, _domain_error)
