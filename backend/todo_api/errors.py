import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 400
    message = "Bad request"
    headers = None

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class InvalidCredentials(ApiError):
    status_code = 401
    message = "The provided credentials are incorrect."


class Unauthenticated(ApiError):
    status_code = 401
    message = "Unauthenticated."
    headers = {"WWW-Authenticate": "Bearer"}


class NotFound(ApiError):
    status_code = 404
    message = "Not found."


async def api_error_handler(request: Request, exc: ApiError):
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message}, headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Collapse pydantic errors into {field: [messages]}"""
    errors = {}
    for err in exc.errors():
        if err["type"] == "json_invalid":
            # loc holds a character offset, not a field
            field = "body"
        else:
            loc = [str(part) for part in err["loc"] if part not in ("body", "query", "path")]
            field = ".".join(loc) or "body"
        errors.setdefault(field, []).append(err["msg"])

    logger.info(f"{request.method} {request.url.path} -> 422: {sorted(errors)}")
    return JSONResponse(
        status_code=422,
        content={"message": "The given data was invalid.", "errors": errors},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
