from typing import Any

from fastapi import status

from app.core.exception import AppError, ServerError
from app.dtos.http_response import HttpResponse


def bad_request(error: AppError) -> HttpResponse:
    return HttpResponse(status=status.HTTP_400_BAD_REQUEST, body=error)


def server_error() -> HttpResponse:
    return HttpResponse(status=status.HTTP_500_INTERNAL_SERVER_ERROR, body=ServerError())


def ok(body: Any) -> HttpResponse:
    return HttpResponse(status=status.HTTP_200_OK, body=body)
