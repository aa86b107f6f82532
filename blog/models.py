"""Request/response models and the {status, msg, body} envelope."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blog.security import MAX_PASSWORD_BYTES

SUCCESS_MSG = "성공"


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


class Resp(BaseModel):
    status: int
    msg: str
    body: Any = None

    @classmethod
    def ok(cls, body: Any = None) -> "Resp":
        if isinstance(body, BaseModel):
            body = body.model_dump(by_alias=True)
        return cls(status=200, msg=SUCCESS_MSG, body=body)

    @classmethod
    def fail(cls, status: int, msg: str) -> "Resp":
        return cls(status=status, msg=msg, body=None)


class SessionUser(BaseModel):
    id: int
    username: str


# --------------- Requests ---------------

class UserJoin(BaseModel):
    username: str = Field(min_length=2, max_length=20, pattern=r"^[a-zA-Z0-9]+$")
    password: str = Field(min_length=4, max_length=20)
    email: str = Field(pattern=r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class UserLogin(BaseModel):
    username: str
    password: str


class UserUpdate(BaseModel):
    password: str = Field(min_length=4, max_length=20)
    email: str = Field(pattern=r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class BoardSave(BaseModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)


class BoardUpdate(BaseModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)


class ReplySave(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    board_id: int = Field(alias="boardId")
    comment: str = Field(min_length=1)


# --------------- Responses ---------------

class UserOut(BaseModel):
    id: int
    username: str
    email: str
    profile: Optional[str] = None


class BoardOut(BaseModel):
    id: int
    title: str
    content: str


class BoardSummary(BaseModel):
    id: int
    title: str


class BoardPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    boards: List[BoardSummary]
    number: int
    total_page: int = Field(alias="totalPage")
    is_first: bool = Field(alias="isFirst")
    is_last: bool = Field(alias="isLast")
    keyword: str = ""


class ReplyItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    comment: str
    username: str
    is_owner: bool = Field(alias="isOwner")


class BoardDetail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    content: str
    username: str
    is_owner: bool = Field(alias="isOwner")
    replies: List[ReplyItem] = []


class ReplyOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    comment: str
    board_id: int = Field(alias="boardId")
    username: str
