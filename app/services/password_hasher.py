import logging

from passlib.context import CryptContext

from ..protocols import PasswordHasher

logger = logging.getLogger(__name__)


class PasslibPasswordHasher(PasswordHasher):
    """PasswordHasher using a passlib CryptContext"""

    def __init__(self, scheme: str = "pbkdf2_sha256"):
        self.scheme = scheme
        self.pwd_context = CryptContext(schemes=[scheme], deprecated="auto")
        logger.info(f"Password hasher initialized with scheme {scheme}")

    def hash(self, password: str) -> str:
        """Return a salted hash of the password"""
        return self.pwd_context.hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        """Constant-time check of a plaintext password against a stored hash"""
        return self.pwd_context.verify(password, hashed_password)
