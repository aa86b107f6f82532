"""
Blog Service
Handles: join/login with JWT bearer tokens, board posts, replies
Port: 8080

Every response, success or failure, is a {status, msg, body} envelope.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog.database import init_db
from blog.models import Resp
from blog.routes import board, reply, user

logger = logging.getLogger("blog.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("[blog] Started on port 8080")
    yield


app = FastAPI(title="Blog Service", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Authorization"],
)

app.include_router(user.router)
app.include_router(board.router)
app.include_router(reply.router)


def _envelope(status: int, msg: str, headers: dict = None) -> JSONResponse:
    return JSONResponse(status_code=status, content=Resp.fail(status, msg).model_dump(), headers=headers)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _envelope(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(part for part in first.get("loc", ()) if isinstance(part, str) and part != "body")
        msg = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        msg = "잘못된 요청입니다"
    return _envelope(400, msg)


@app.exception_handler(Exception)
async def server_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _envelope(500, "서버 오류가 발생했습니다")


@app.get("/health")
async def health():
    return {"status": "ok", "service": "blog"}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run("blog.main:app", host="0.0.0.0", port=8080, reload=True)
