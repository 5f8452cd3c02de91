"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first (via ``python-dotenv``) without overriding variables that
are already set.  Defaults are provided for all fields and are
evaluated each time a ``Settings`` instance is created, so tests can
adjust the environment and build a fresh instance.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

# Project root: the directory that contains the ``phone_store_api`` package.
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

DEFAULT_PORT = 3000


def _env_port() -> int:
    try:
        return int(os.getenv("PORT", str(DEFAULT_PORT)))
    except ValueError:
        return DEFAULT_PORT


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "HyperOS Phone Management API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Listening address used by ``run.py``.  ``PORT`` falls back to 3000
    # when unset or not a valid integer.
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=_env_port)

    # Directory served as static assets; the phone collection lives inside
    # it unless ``PHONES_FILE`` is an absolute path.
    public_dir: str = field(default_factory=lambda: os.getenv("PUBLIC_DIR", str(BASE_DIR / "public")))
    phones_file: str = field(default_factory=lambda: os.getenv("PHONES_FILE", "phones.json"))

    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))

    def __post_init__(self) -> None:
        if not os.path.isabs(self.phones_file):
            self.phones_file = str(Path(self.public_dir) / self.phones_file)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
