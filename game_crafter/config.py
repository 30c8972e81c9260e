# config.py
from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env BEFORE reading env vars
load_dotenv()


def get_app_id() -> str:
    return os.getenv("SUI_APP_ID", "web")


def get_template_id() -> str:
    return os.getenv("SUI_TEMPLATE_ID", "default")


# First segment of every published page route: /ai/<chat_id>
ROUTE_NAMESPACE = "ai"


def get_default_title() -> str:
    return os.getenv("DEFAULT_PAGE_TITLE", "Game")


def get_sandbox_root() -> Path:
    return Path(os.getenv("SANDBOX_ROOT", "workspaces")).resolve()


def get_pages_table() -> str:
    return os.getenv("PAGES_TABLE", "pages")


def get_pages_bucket() -> str:
    return os.getenv("PAGES_BUCKET", "pages")


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for entry points (CLI, API). Library code never calls this."""
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
