"""Auth service — JWT session tokens and password hashing."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import get_settings
from app.core.exceptions import UnauthorizedException

settings = get_settings()
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, as carried by the session token."""

    id: int
    name: str


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user_id: int, name: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(days=settings.JWT_EXPIRATION_DAYS)
    )
    to_encode = {"id": user_id, "name": name, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    try:
        return jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        return None


def authenticate(token: str) -> Identity:
    """Turn a bearer token into an Identity, or raise UnauthorizedException."""
    payload = decode_access_token(token)
    if payload is None:
        raise UnauthorizedException("Unauthorized. Invalid token.")

    user_id = payload.get("id")
    name = payload.get("name")
    if user_id is None or name is None:
        raise UnauthorizedException("Unauthorized. Invalid token.")

    return Identity(id=int(user_id), name=name)
