import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from blog.database import DBBoard, DBReply, get_db
from blog.dependencies import require_session_user
from blog.exceptions import Exception403, Exception404
from blog.models import ReplyOut, ReplySave, Resp, SessionUser

logger = logging.getLogger("blog.reply")

router = APIRouter(tags=["reply"])


@router.post("/api/reply")
async def reply_save(
    body: ReplySave,
    session_user: SessionUser = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    if not db.get(DBBoard, body.board_id):
        raise Exception404("댓글을 달 게시글이 존재하지 않습니다")

    reply = DBReply(comment=body.comment, board_id=body.board_id, user_id=session_user.id)
    db.add(reply)
    db.commit()
    db.refresh(reply)

    logger.info("User %s replied %s on board %s", session_user.username, reply.id, reply.board_id)
    return Resp.ok(ReplyOut(
        id=reply.id,
        comment=reply.comment,
        board_id=reply.board_id,
        username=session_user.username,
    ))


@router.delete("/api/reply/{reply_id}")
async def reply_delete(
    reply_id: int,
    session_user: SessionUser = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    reply = db.get(DBReply, reply_id)
    if not reply:
        raise Exception404("댓글이 존재하지 않습니다")
    if reply.user_id != session_user.id:
        raise Exception403("댓글을 삭제할 권한이 없습니다")

    db.delete(reply)
    db.commit()
    logger.info("User %s deleted reply %s", session_user.username, reply_id)
    return Resp.ok()
