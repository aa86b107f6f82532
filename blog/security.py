"""Password hashing and JWT helpers."""

import time

import bcrypt
import jwt

from blog.config import SECRET_KEY, TOKEN_EXPIRY_SECONDS

ALGORITHM = "HS512"
TOKEN_SUBJECT = "blog"
TOKEN_PREFIX = "Bearer "

# bcrypt rejects passwords longer than this
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def check_password(password: str, hashed: str) -> bool:
    if len(password.encode()) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(password.encode(), hashed.encode())


def create_token(user_id: int, username: str, expires_in: int = TOKEN_EXPIRY_SECONDS) -> str:
    """Sign a bearer token for the given user. Returned without the "Bearer " prefix."""
    now = int(time.time())
    payload = {
        "sub": TOKEN_SUBJECT,
        "id": user_id,
        "username": username,
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)


def verify_token(token: str) -> dict:
    """
    Decode and validate a token (prefix already stripped).
    Raises jwt.ExpiredSignatureError / jwt.InvalidTokenError on failure.
    """
    return jwt.decode(
        token,
        SECRET_KEY,
        algorithms=[ALGORITHM],
        options={"require": ["exp", "id", "username"]},
    )
