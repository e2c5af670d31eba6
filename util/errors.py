# util/errors.py
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from model.api import ErrorResponse
from util.enums import ErrorMessage


class AppError(Exception):
    """
    Error surfaced to API callers as {"error": message} with the given status.
    """

    def __init__(self, message: str, http_status: int) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status

    @classmethod
    def of(cls, error: ErrorMessage) -> "AppError":
        return cls(error.value.message, error.value.http_status)


class NetworkError(Exception):
    """Raised by the chat client when the evaluation endpoint cannot be used."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    body = ErrorResponse(error=exc.message)
    return JSONResponse(status_code=exc.http_status, content=body.model_dump())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Malformed or missing bodies are reported the same way as an empty question.
    return await app_error_handler(request, AppError.of(ErrorMessage.QUESTION_REQUIRED))
