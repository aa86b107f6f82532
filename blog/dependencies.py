import logging

import jwt
from fastapi import Header

from blog.exceptions import Exception401
from blog.models import SessionUser
from blog.security import TOKEN_PREFIX, verify_token

logger = logging.getLogger("blog.auth")


def require_session_user(authorization: str = Header(None)) -> SessionUser:
    """
    Resolve the caller from "Authorization: Bearer <token>".
    Every /api route depends on this; raises 401 when the token is missing or bad.
    """
    if not authorization:
        raise Exception401("토큰을 찾을 수 없습니다")
    if not authorization.startswith(TOKEN_PREFIX):
        raise Exception401("토큰 검증에 실패했습니다")

    token = authorization[len(TOKEN_PREFIX):]
    try:
        claims = verify_token(token)
    except jwt.ExpiredSignatureError:
        raise Exception401("토큰이 만료되었습니다")
    except jwt.InvalidTokenError as e:
        logger.warning("Rejected bearer token: %s", e)
        raise Exception401("토큰 검증에 실패했습니다")

    return SessionUser(id=claims["id"], username=claims["username"])
