"""Response envelopes.

Success:
    {"StatusCode": 200, "Balance": 1000}
Error:
    {"StatusCode": 400, "Message": "Invalid username or token."}

All responses are rendered by Starlette's JSONResponse (compact separators,
``application/json``), so identical payloads serialize to identical bytes.
"""

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.cb_common.errors import AppError


class ErrorResponse(BaseModel):
    StatusCode: int
    Message: str


def error_response(status_code: int, message: str) -> ErrorResponse:
    return ErrorResponse(StatusCode=status_code, Message=message)


def error_json(exc: AppError) -> JSONResponse:
    resp = error_response(exc.http_status, exc.message)
    return JSONResponse(status_code=exc.http_status, content=resp.model_dump())
