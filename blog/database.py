import logging
from datetime import datetime, timezone

from sqlalchemy import create_engine, event, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import sessionmaker, declarative_base, relationship, Session

from blog.config import DATABASE_PATH
from blog.security import hash_password

logger = logging.getLogger("blog.database")

DATABASE_URL = f"sqlite:///{DATABASE_PATH}"

engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


# pysqlite never emits BEGIN itself, which breaks SAVEPOINT. Hand transaction
# control back to SQLAlchemy so nested transactions (and test rollback) work.
@event.listens_for(engine, "connect")
def _disable_pysqlite_transactions(dbapi_connection, connection_record):
    dbapi_connection.isolation_level = None


@event.listens_for(engine, "begin")
def _emit_begin(conn):
    conn.exec_driver_sql("BEGIN")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class DBUser(Base):
    __tablename__ = "user_tb"

    id = Column(Integer, primary_key=True)
    username = Column(String(20), unique=True, nullable=False)
    password = Column(String, nullable=False)
    email = Column(String, nullable=False)
    profile = Column(String, nullable=True)
    created_at = Column(String, default=_now)


class DBBoard(Base):
    __tablename__ = "board_tb"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    user_id = Column(Integer, ForeignKey("user_tb.id"), nullable=False)
    created_at = Column(String, default=_now)

    user = relationship("DBUser")
    replies = relationship(
        "DBReply",
        back_populates="board",
        cascade="all, delete-orphan",
        order_by="DBReply.id",
    )


class DBReply(Base):
    __tablename__ = "reply_tb"

    id = Column(Integer, primary_key=True)
    comment = Column(String, nullable=False)
    board_id = Column(Integer, ForeignKey("board_tb.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("user_tb.id"), nullable=False)
    created_at = Column(String, default=_now)

    board = relationship("DBBoard", back_populates="replies")
    user = relationship("DBUser")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session():
    """Returns a direct session for non-request contexts like init_db."""
    return SessionLocal()


def init_db():
    Base.metadata.create_all(bind=engine)

    db = get_session()
    try:
        if db.query(DBUser).count() == 0:
            _seed(db)
    finally:
        db.close()

    logger.info("[blog] Database initialized at %s", DATABASE_PATH)


def _seed(db: Session):
    password = hash_password("1234")
    ssar = DBUser(id=1, username="ssar", password=password, email="ssar@nate.com")
    cos = DBUser(id=2, username="cos", password=password, email="cos@nate.com")
    love = DBUser(id=3, username="love", password=password, email="love@nate.com")
    db.add_all([ssar, cos, love])
    db.flush()

    owners = {1: ssar, 2: ssar, 3: ssar, 4: ssar, 5: ssar, 6: ssar, 7: cos, 8: cos, 9: cos, 10: love}
    for board_id, owner in owners.items():
        db.add(DBBoard(id=board_id, title=f"제목{board_id}", content=f"내용{board_id}", user_id=owner.id))
    db.flush()

    db.add_all([
        DBReply(comment="댓글1", board_id=4, user_id=ssar.id),
        DBReply(comment="댓글2", board_id=10, user_id=ssar.id),
        DBReply(comment="댓글3", board_id=10, user_id=cos.id),
        DBReply(comment="댓글4", board_id=10, user_id=love.id),
    ])
    db.commit()
    logger.info("[blog] Seeded %d users and %d boards.", 3, len(owners))
