"""Authentication service for session tokens and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from src.config import get_settings
from src.models.user import User

logger = logging.getLogger(__name__)
settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_session_token(user_id: int, expires_in: timedelta | None = None) -> str:
    """Create the signed token stored in the session cookie."""
    now = datetime.now(UTC)
    expire = now + (expires_in or timedelta(minutes=settings.session_max_age_minutes))
    to_encode = {
        "sub": str(user_id),
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.session_secret, algorithm=settings.session_algorithm)


def decode_session_token(token: str) -> dict | None:
    """Decode and validate a session token; expired or tampered tokens yield None."""
    try:
        return jwt.decode(token, settings.session_secret, algorithms=[settings.session_algorithm])
    except JWTError:
        return None


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email, ignoring case."""
    return db.query(User).filter(User.email == email.strip().lower()).first()


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Get a user by id."""
    return db.query(User).filter(User.id == user_id).first()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        logger.warning("Login attempt for an unknown email")
        return None
    if not verify_password(password, user.password_hash):
        logger.warning(f"Failed password check for user {user.id}")
        return None
    return user


def create_user(db: Session, email: str, password: str, name: str) -> User:
    """Create a new user.

    Raises sqlalchemy.exc.IntegrityError when the email is already taken; the
    session is rolled back before re-raising.
    """
    hashed_password = get_password_hash(password)
    user = User(email=email.strip().lower(), password_hash=hashed_password, name=name)
    db.add(user)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(user)
    logger.info(f"Created user {user.id}")
    return user
