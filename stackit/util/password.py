"""Password hashing helpers."""

from passlib.context import CryptContext

DEFAULT_ROUNDS = 12


def create_password_context(rounds: int = DEFAULT_ROUNDS) -> CryptContext:
    """Build a bcrypt hashing context.

    Args:
        rounds: bcrypt cost factor for new hashes (verification reads the
            cost stored in each hash)

    Returns:
        Configured passlib context
    """
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


_default_context = create_password_context()


def hash_password(password: str, context: CryptContext = _default_context) -> str:
    """Hash a password with a per-hash random salt."""
    return context.hash(password)


def verify_password(
    password: str, password_hash: str, context: CryptContext = _default_context
) -> bool:
    """Check a password against a stored hash."""
    return context.verify(password, password_hash)
