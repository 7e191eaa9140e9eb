"""JSON envelope shared by every task endpoint: {success, data|message}."""

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

_NO_DATA = object()


def error_message(exc: BaseException) -> str:
    """Text of the underlying driver error when SQLAlchemy wraps one."""
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc)


def success(data: Any = _NO_DATA) -> JSONResponse:
    body: dict[str, Any] = {"success": True}
    if data is not _NO_DATA:
        body["data"] = jsonable_encoder(data)
    return JSONResponse(body, status_code=status.HTTP_200_OK)


def failure(exc: BaseException) -> JSONResponse:
    return JSONResponse(
        {"success": False, "message": error_message(exc)},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
