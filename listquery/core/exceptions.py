"""Application-level exceptions and FastAPI exception handlers."""


from typing import Iterable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

class ValidationError(AppException):
    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, status_code=422, code=code)

class FilterNotAllowedError(ValidationError):
    """Raised when a request filters on a field the endpoint does not permit."""

    def __init__(self, fields: Iterable[str]):
        self.fields = tuple(fields)
        names = ", ".join(f"'{f}'" for f in self.fields)
        super().__init__(f"Filtering is not allowed on: {names}", code="FILTER_NOT_ALLOWED")

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}

def register_exception_handlers(app: FastAPI) -> None:
    """Attach the application exception handler to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message),
        )
