from typing import Optional
from pydantic import BaseModel


class SignupRequest(BaseModel):
    """
    Signup payload.

    Every field is optional here so that missing values reach the
    controller, which reports them as `MissingParamError`.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class SignupResponse(BaseModel):
    """Success body for signup"""

    name: str
    email: str
    password: str


class ErrorResponse(BaseModel):
    """Error body for signup"""

    name: str
    message: str
