from dependency_injector import containers, providers

from app.controllers.signup_controller import SignupController
from app.core.config import settings
from app.services.email_validator_adapter import EmailValidatorAdapter
from app.services.password_hasher import PasslibPasswordHasher
from app.services.password_policy_validator import PasswordPolicyValidator


class Container(containers.DeclarativeContainer):
    """Application DI Container"""

    email_validator = providers.Singleton(
        EmailValidatorAdapter,
        check_deliverability=settings.EMAIL_CHECK_DELIVERABILITY,
    )

    password_validator = providers.Singleton(
        PasswordPolicyValidator,
        min_length=settings.PASSWORD_MIN_LENGTH,
        max_length=settings.PASSWORD_MAX_LENGTH,
        require_letter=settings.PASSWORD_REQUIRE_LETTER,
        require_digit=settings.PASSWORD_REQUIRE_DIGIT,
    )

    password_hasher = providers.Singleton(
        PasslibPasswordHasher,
        scheme=settings.PASSWORD_HASH_SCHEME,
    )

    signup_controller = providers.Factory(
        SignupController,
        email_validator=email_validator,
        password_validator=password_validator,
        password_hasher=password_hasher,
    )


container = Container()
