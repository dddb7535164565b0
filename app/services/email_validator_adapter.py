import logging

from email_validator import EmailNotValidError, validate_email

from ..protocols import EmailValidator

logger = logging.getLogger(__name__)


class EmailValidatorAdapter(EmailValidator):
    """EmailValidator backed by the `email-validator` package"""

    def __init__(self, check_deliverability: bool = False):
        self.check_deliverability = check_deliverability

    def validate(self, email: str) -> bool:
        try:
            validate_email(email, check_deliverability=self.check_deliverability)
        except EmailNotValidError:
            logger.debug("Email rejected: failed syntax or deliverability check")
            return False
        return True
