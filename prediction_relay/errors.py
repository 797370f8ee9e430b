from enum import Enum

from fastapi.responses import JSONResponse

from prediction_relay.schemas import ErrorBody


class ErrorKind(str, Enum):
    METHOD_NOT_ALLOWED = "Method not allowed"
    EMPTY_BODY = "No image data provided"
    BODY_TOO_LARGE = "Image too large"
    CONFIGURATION = "Server configuration error"
    UPSTREAM = "Azure API request failed"
    INTERNAL = "Internal server error"


class RelayError(Exception):
    def __init__(self, kind: ErrorKind, status_code: int, message: str | None = None) -> None:
        super().__init__(message or kind.value)
        self.kind = kind
        self.status_code = status_code
        self.message = message

    def to_response(self) -> JSONResponse:
        body = ErrorBody(error=self.kind.value, message=self.message)
        return JSONResponse(status_code=self.status_code, content=body.model_dump(exclude_none=True))
