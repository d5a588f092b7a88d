"""Response envelopes shared by every catalog endpoint.

Successful calls answer ``{"status": "success", "message", "data"}``,
failures answer ``{"status": "fail", "message"}``.
"""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success(message: str, data: Any, status_code: int = 200) -> JSONResponse:
    body = {
        "status": "success",
        "message": message,
        "data": jsonable_encoder(data, by_alias=True),
    }
    return JSONResponse(status_code=status_code, content=body)


def fail(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "fail", "message": message},
    )
