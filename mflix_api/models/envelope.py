# mflix_api/models/envelope.py

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from mflix_api.utils.helpers import to_jsonable


class Envelope(BaseModel):
    """Uniform JSON wrapper returned by every endpoint."""
    status: int = Field(..., description="HTTP status code, repeated in the body.")
    message: Optional[str] = Field(None, description="Human readable outcome.")
    data: Optional[Dict[str, Any]] = Field(None, description="Payload of a successful call.")
    error: Optional[str] = Field(None, description="Failure detail.")


def envelope_response(
    status_code: int,
    message: Optional[str] = None,
    data: Optional[Dict[str, Any]] = None,
    error: Optional[str] = None,
) -> JSONResponse:
    """Builds an envelope response, omitting absent keys and encoding BSON values."""
    body: Dict[str, Any] = {"status": status_code}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = to_jsonable(data)
    if error is not None:
        body["error"] = error
    return JSONResponse(status_code=status_code, content=body)
