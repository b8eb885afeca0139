import logging
from typing import Optional

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# PUBLIC_INTERFACE
def hash_password(password: str) -> str:
    """Hash a plaintext password."""
    return _pwd_context.hash(password)


# PUBLIC_INTERFACE
def verify_password(password: str, password_hash: Optional[str]) -> bool:
    """
    Verify a plaintext password against a stored hash.

    The comparison is constant-time. When there is no usable hash (unknown
    user, empty column, legacy plaintext value) a dummy bcrypt verification
    still runs so every rejection costs the same, and the result is False.
    """
    if not password_hash:
        _pwd_context.dummy_verify()
        return False
    try:
        return _pwd_context.verify(password, password_hash)
    except ValueError:
        logger.warning("Stored password value is not a recognised hash; rejecting login")
        _pwd_context.dummy_verify()
        return False
