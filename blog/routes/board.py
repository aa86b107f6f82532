"""Board routes: paged list, detail, update form, save, update, delete."""

import logging
import math

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from blog import config
from blog.database import DBBoard, get_db
from blog.dependencies import require_session_user
from blog.exceptions import Exception403, Exception404, Exception500
from blog.models import (
    BoardDetail,
    BoardOut,
    BoardPage,
    BoardSave,
    BoardSummary,
    BoardUpdate,
    ReplyItem,
    Resp,
    SessionUser,
)

logger = logging.getLogger("blog.board")

router = APIRouter(tags=["board"])


def _find_board(db: Session, board_id: int) -> DBBoard:
    board = db.get(DBBoard, board_id)
    if not board:
        raise Exception404("게시글이 존재하지 않습니다")
    return board


def _board_out(board: DBBoard) -> BoardOut:
    return BoardOut(id=board.id, title=board.title, content=board.content)


@router.get("/board")
async def board_list(
    page: int = Query(0, ge=0),
    title: str = Query(""),
    db: Session = Depends(get_db),
):
    size = config.BOARD_PAGE_SIZE
    query = db.query(DBBoard)
    if title:
        query = query.filter(DBBoard.title.contains(title, autoescape=True))

    total = query.count()
    total_page = max(1, math.ceil(total / size))
    rows = query.order_by(DBBoard.id.desc()).offset(page * size).limit(size).all()

    return Resp.ok(BoardPage(
        boards=[BoardSummary(id=row.id, title=row.title) for row in rows],
        number=page,
        total_page=total_page,
        is_first=page == 0,
        is_last=page >= total_page - 1,
        keyword=title,
    ))


@router.get("/api/board/{board_id}/detail")
async def board_detail(
    board_id: int,
    session_user: SessionUser = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    board = _find_board(db, board_id)
    replies = [
        ReplyItem(
            id=reply.id,
            comment=reply.comment,
            username=reply.user.username,
            is_owner=reply.user_id == session_user.id,
        )
        for reply in board.replies
    ]
    return Resp.ok(BoardDetail(
        id=board.id,
        title=board.title,
        content=board.content,
        username=board.user.username,
        is_owner=board.user_id == session_user.id,
        replies=replies,
    ))


@router.get("/api/board/{board_id}")
async def board_update_form(
    board_id: int,
    session_user: SessionUser = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    board = _find_board(db, board_id)
    if board.user_id != session_user.id:
        raise Exception403("게시글을 수정할 권한이 없습니다")
    return Resp.ok(_board_out(board))


@router.post("/api/board")
async def board_save(
    body: BoardSave,
    session_user: SessionUser = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    board = DBBoard(title=body.title, content=body.content, user_id=session_user.id)
    try:
        db.add(board)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Saving board for user %s failed", session_user.id)
        raise Exception500()

    db.refresh(board)
    logger.info("User %s saved board %s", session_user.username, board.id)
    return Resp.ok(_board_out(board))


@router.put("/api/board/{board_id}")
async def board_update(
    board_id: int,
    body: BoardUpdate,
    session_user: SessionUser = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    board = _find_board(db, board_id)
    if board.user_id != session_user.id:
        raise Exception403("게시글을 수정할 권한이 없습니다")

    board.title = body.title
    board.content = body.content
    db.commit()
    db.refresh(board)
    logger.info("User %s updated board %s", session_user.username, board.id)
    return Resp.ok(_board_out(board))


@router.delete("/api/board/{board_id}")
async def board_delete(
    board_id: int,
    session_user: SessionUser = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    board = _find_board(db, board_id)
    if board.user_id != session_user.id:
        raise Exception403("게시글을 삭제할 권한이 없습니다")

    # replies go with the board (delete-orphan cascade)
    db.delete(board)
    db.commit()
    logger.info("User %s deleted board %s", session_user.username, board_id)
    return Resp.ok()
