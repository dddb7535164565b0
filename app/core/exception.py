from typing import Any

from app.constants.error_constant import (
    ERROR_INVALID_PARAM,
    ERROR_MISSING_PARAM,
    ERROR_SERVER,
    MESSAGE_INVALID_PARAM,
    MESSAGE_MISSING_PARAM,
    MESSAGE_SERVER_ERROR,
)


class AppError(Exception):
    """
    Base for errors returned as response bodies.

    Errors compare by type and message so a response body can be checked
    against a freshly built instance.
    """

    name: str = "AppError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AppError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "message": self.message}


class MissingParamError(AppError):
    name = ERROR_MISSING_PARAM

    def __init__(self, param_name: str):
        self.param_name = param_name
        super().__init__(MESSAGE_MISSING_PARAM.format(param=param_name))


class InvalidParamError(AppError):
    name = ERROR_INVALID_PARAM

    def __init__(self, param_name: str):
        self.param_name = param_name
        super().__init__(MESSAGE_INVALID_PARAM.format(param=param_name))


class ServerError(AppError):
    name = ERROR_SERVER

    def __init__(self):
        super().__init__(MESSAGE_SERVER_ERROR)
