# tests/conftest.py
"""
Shared fixtures
- Stub collaborators for the signup controller (always accept, fixed hash)
- A `make_sut` factory returning the controller and its stubs
- A TestClient over the real app with container providers overridable per test
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from fastapi.testclient import TestClient

from app.controllers.signup_controller import SignupController
from app.protocols import EmailValidator, PasswordHasher, PasswordValidator


VALID_DATA = {
    "name": "valid_name",
    "email": "valid_email@email.com",
    "password": "valid_password",
}


# ──────────────────────────────────────────────────────────────────────────────
# 🧪 Stub collaborators
# ──────────────────────────────────────────────────────────────────────────────
class EmailValidatorStub(EmailValidator):
    def validate(self, email: str) -> bool:
        return True


class PasswordValidatorStub(PasswordValidator):
    def validate(self, password: str) -> bool:
        return True


class PasswordHasherStub(PasswordHasher):
    def hash(self, password: str) -> str:
        return "hashed_password"


@dataclass
class SutTypes:
    sut: SignupController
    email_validator: EmailValidatorStub
    password_validator: PasswordValidatorStub
    password_hasher: PasswordHasherStub


@pytest.fixture()
def make_sut():
    def _make() -> SutTypes:
        email_validator = EmailValidatorStub()
        password_validator = PasswordValidatorStub()
        password_hasher = PasswordHasherStub()
        sut = SignupController(email_validator, password_validator, password_hasher)
        return SutTypes(sut, email_validator, password_validator, password_hasher)

    return _make


@pytest.fixture()
def valid_data() -> dict:
    return dict(VALID_DATA)


# ──────────────────────────────────────────────────────────────────────────────
# 🌐 HTTP client
# ──────────────────────────────────────────────────────────────────────────────
@pytest.fixture()
def app():
    from main import app as fastapi_app

    yield fastapi_app
    fastapi_app.container.reset_override()


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
