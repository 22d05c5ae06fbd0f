# app/core/errors.py
#
# Error taxonomy shared by routers and services. Each class is an
# HTTPException so FastAPI renders it without extra wiring.

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ApiError(HTTPException):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str, cause: str | None = None):
        super().__init__(status_code=self.status_code, detail=detail)
        self.cause = cause


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class BusinessRuleViolation(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def parse_id(raw: str, label: str) -> int:
    """Numeric path parameter, or 400 "Invalid <label> ID"."""
    if not raw.isdigit():
        raise ValidationError(f"Invalid {label} ID")
    return int(raw)


def _summarize(errors) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error["loc"][1:]) or error["loc"][0]
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


async def api_error_handler(request: Request, exc: ApiError):
    content = {"detail": exc.detail}
    if exc.cause:
        content["cause"] = exc.cause
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    in_body = all(error["loc"][0] == "body" for error in errors)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Invalid request body" if in_body else "Invalid request parameters",
            "cause": _summarize(errors),
        },
    )
