# Role: Central configuration module. Loads .env into environment variables and computes runtime flags
# (DEBUG, PORT). Components read their own credentials with os.getenv at construction time.

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

DEBUG: bool = False
PORT: int = 5000


def load_env() -> None:
    """
    Load .env into os.environ, then recompute DEBUG and PORT.
    This keeps the flags correct even if load_env() is called after import.
    """
    global DEBUG, PORT
    load_dotenv()
    # Key line: accept common truthy values.
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}
    PORT = int(os.getenv("PORT", "5000"))


def configure_logging() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s - %(message)s")
    logging.getLogger("profsync").setLevel(logging.DEBUG if DEBUG else logging.INFO)


def gemini_api_key() -> str | None:
    return os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
