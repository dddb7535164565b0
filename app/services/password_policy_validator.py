import logging

from ..protocols import PasswordValidator

logger = logging.getLogger(__name__)


class PasswordPolicyValidator(PasswordValidator):
    """
    Checks a password against a length and character-class policy.

    Rules are evaluated in order and the first violation rejects the
    password. The password itself is never logged.
    """

    def __init__(
        self,
        min_length: int = 8,
        max_length: int = 128,
        require_letter: bool = True,
        require_digit: bool = False,
    ):
        self.min_length = min_length
        self.max_length = max_length
        self.require_letter = require_letter
        self.require_digit = require_digit

    def validate(self, password: str) -> bool:
        violation = self._first_violation(password)
        if violation:
            logger.debug(f"Password rejected by rule: {violation}")
            return False
        return True

    def _first_violation(self, password: str) -> str | None:
        if len(password) < self.min_length:
            return "min_length"
        if len(password) > self.max_length:
            return "max_length"
        if self.require_letter and not any(c.isalpha() for c in password):
            return "require_letter"
        if self.require_digit and not any(c.isdigit() for c in password):
            return "require_digit"
        return None
