from app.core.exception import InvalidParamError, MissingParamError
from app.core.logging_config import get_logger
from app.dtos.http_response import HttpResponse, SignupResult
from app.protocols import EmailValidator, PasswordHasher, PasswordValidator
from app.schemas.signup import SignupRequest
from app.utils.http_helpers import bad_request, ok, server_error

logger = get_logger(__name__)


class SignupController:
    """Validates a signup request and hashes the password"""

    REQUIRED_FIELDS = ("name", "email", "password")

    def __init__(
        self,
        email_validator: EmailValidator,
        password_validator: PasswordValidator,
        password_hasher: PasswordHasher,
    ):
        self.email_validator = email_validator
        self.password_validator = password_validator
        self.password_hasher = password_hasher

    def handle(self, request: SignupRequest) -> HttpResponse:
        """
        Handle a signup request

        Checks run in a fixed order and stop at the first failure:
        required fields (name, email, password), email format,
        password format, then hashing.

        Args:
            request: Signup payload

        Returns:
            HttpResponse with 200, 400 or 500 status. Never raises.
        """
        for field in self.REQUIRED_FIELDS:
            if not getattr(request, field):
                logger.info(
                    "Signup rejected: missing param",
                    extra={"param": field},
                )
                return bad_request(MissingParamError(field))

        try:
            if not self.email_validator.validate(request.email):
                logger.info("Signup rejected: invalid param", extra={"param": "email"})
                return bad_request(InvalidParamError("email"))

            if not self.password_validator.validate(request.password):
                logger.info("Signup rejected: invalid param", extra={"param": "password"})
                return bad_request(InvalidParamError("password"))

            hashed_password = self.password_hasher.hash(request.password)
        except Exception as e:
            logger.error(
                "Signup failed",
                exc_info=True,
                extra={"error_type": type(e).__name__},
            )
            return server_error()

        logger.info("Signup accepted", extra={"user_name": request.name})

        return ok(
            SignupResult(
                name=request.name,
                email=request.email,
                password=hashed_password,
            )
        )
