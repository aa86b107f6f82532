"""User routes: join, login, username check, own info and update."""

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blog.database import DBUser, get_db
from blog.dependencies import require_session_user
from blog.exceptions import Exception400, Exception401, Exception404
from blog.models import Resp, SessionUser, UserJoin, UserLogin, UserOut, UserUpdate
from blog.security import TOKEN_PREFIX, check_password, create_token, hash_password

logger = logging.getLogger("blog.user")

router = APIRouter(tags=["user"])


def _user_out(user: DBUser) -> UserOut:
    return UserOut(id=user.id, username=user.username, email=user.email, profile=user.profile)


@router.post("/join")
async def join(body: UserJoin, db: Session = Depends(get_db)):
    if db.query(DBUser).filter(DBUser.username == body.username).first():
        raise Exception400("동일한 유저네임이 존재합니다")

    user = DBUser(
        username=body.username,
        password=hash_password(body.password),
        email=body.email,
    )
    try:
        db.add(user)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Exception400("동일한 유저네임이 존재합니다")

    db.refresh(user)
    logger.info("Joined user %s (id=%s)", user.username, user.id)
    return Resp.ok(_user_out(user))


@router.post("/login")
async def login(body: UserLogin, response: Response, db: Session = Depends(get_db)):
    user = db.query(DBUser).filter(DBUser.username == body.username).first()

    if not user or not check_password(body.password, user.password):
        logger.info("Failed login for %s", body.username)
        raise Exception401("유저네임 혹은 비밀번호가 틀렸습니다")

    token = create_token(user.id, user.username)
    response.headers["Authorization"] = TOKEN_PREFIX + token
    logger.info("User %s logged in", user.username)
    return Resp.ok()


@router.get("/user/same-username-check")
async def same_username_check(username: str, db: Session = Depends(get_db)):
    """Body is true when the username is still free."""
    taken = db.query(DBUser).filter(DBUser.username == username).first() is not None
    return Resp.ok(not taken)


@router.get("/api/user")
async def user_info(
    session_user: SessionUser = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    user = db.get(DBUser, session_user.id)
    if not user:
        raise Exception404("회원 정보가 존재하지 않습니다")
    return Resp.ok(_user_out(user))


@router.put("/api/user")
async def user_update(
    body: UserUpdate,
    session_user: SessionUser = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    user = db.get(DBUser, session_user.id)
    if not user:
        raise Exception404("회원 정보가 존재하지 않습니다")

    user.password = hash_password(body.password)
    user.email = body.email
    db.commit()
    db.refresh(user)
    logger.info("Updated user %s", user.username)
    return Resp.ok(_user_out(user))
