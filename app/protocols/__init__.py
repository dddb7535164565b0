from .email_validator import EmailValidator
from .password_hasher import PasswordHasher
from .password_validator import PasswordValidator

__all__ = ["EmailValidator", "PasswordHasher", "PasswordValidator"]
