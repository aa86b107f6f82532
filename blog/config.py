"""Blog service settings, read from the environment (or ../.env)."""

import os

from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))

SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    raise RuntimeError("SECRET_KEY environment variable is required")

TOKEN_EXPIRY_SECONDS = int(os.getenv("TOKEN_EXPIRY_SECONDS", "604800"))  # 7 days

DATABASE_PATH = os.getenv("BLOG_DB_PATH", "blog.db")

BOARD_PAGE_SIZE = int(os.getenv("BOARD_PAGE_SIZE", "3"))
