"""
Exception handlers that render every error as ``{"error": "<message>"}``.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_PAYLOAD = "Invalid request payload"
INVALID_ITEM_ID = "Invalid item ID"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error response with the given status code."""
    return JSONResponse(status_code=status_code, content={"error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Map request decoding failures to 400.

    Path parameter errors mean the item ID was not an integer; anything else
    is a malformed body.
    """
    locations = {(err.get("loc") or ("body",))[0] for err in exc.errors()}
    message = INVALID_ITEM_ID if locations == {"path"} else INVALID_PAYLOAD
    logger.info(f"{request.method} {request.url.path}: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(f"Database error on {request.method} {request.url.path}")
    message = str(getattr(exc, "orig", None) or exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
