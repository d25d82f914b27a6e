"""Unified error body.

Success responses carry the bare record or array. Every error response has
this shape:
{
    "error": "Not Found",      // HTTP reason phrase
    "message": "User not found: 42",
    "statusCode": 404
}
"""

from http import HTTPStatus

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: str
    message: str
    status_code: int = Field(alias="statusCode")


def error_response(http_status: int, message: str) -> ErrorResponse:
    try:
        phrase = HTTPStatus(http_status).phrase
    except ValueError:
        phrase = "Error"
    return ErrorResponse(error=phrase, message=message, status_code=http_status)
