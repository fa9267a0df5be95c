"""
Error types and the JSON error envelope

Every error response body is ``{"code": <http status>, "message": <text>}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Error that maps directly onto an HTTP response"""

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class StorageError(Exception):
    """Raised by the stores when the database rejects a statement"""


def bad_request(message: str) -> APIError:
    return APIError(status.HTTP_400_BAD_REQUEST, message)


def unauthorized(message: str) -> APIError:
    return APIError(status.HTTP_401_UNAUTHORIZED, message)


def error_response(code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=code, content={"code": code, "message": message})


def decode_error_message(exc: RequestValidationError) -> str:
    """Flatten pydantic's error list into a single readable line"""
    parts = []
    for error in exc.errors():
        loc = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        msg = error.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "invalid request body"


def register_exception_handlers(app: FastAPI):
    """Install handlers that render every error in the {code, message} envelope"""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        return error_response(exc.code, exc.message)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        # TODO: stop passing driver messages to clients once callers no longer rely on them
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(RequestValidationError)
    async def decode_error_handler(request: Request, exc: RequestValidationError):
        message = decode_error_message(exc)
        logger.info("error when decoding request %s %s: %s", request.method, request.url.path, message)
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))
