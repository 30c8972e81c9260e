# data_class.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .config import ROUTE_NAMESPACE, get_default_title


@dataclass(frozen=True)
class GameFiles:
    """Raw artifacts read from the sandbox. css/js are "" when the file was absent."""
    html: str
    css: str = ""
    js: str = ""


@dataclass(frozen=True)
class PageSource:
    markup: str
    style: str
    script: str


@dataclass(frozen=True)
class PageIdentity:
    chat_id: str
    title: Optional[str] = None

    @property
    def route(self) -> str:
        return page_route(self.chat_id)

    @property
    def page_title(self) -> str:
        return self.title or get_default_title()


@dataclass(frozen=True)
class PageResult:
    success: bool
    route: str
    url: str
    error: Optional[str] = None


@dataclass(frozen=True)
class BuildResult:
    success: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class ExecResult:
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class PublishReport:
    status: str  # "success" | "error" | "skipped"
    chat_id: Optional[str] = None
    route: Optional[str] = None
    url: Optional[str] = None
    messages: List[str] = field(default_factory=list)
    error: Optional[str] = None
    duration_ms: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "chat_id": self.chat_id,
            "route": self.route,
            "game_url": self.url,
            "messages": list(self.messages),
            "error": self.error,
            "duration_ms": self.duration_ms,
        }


def page_route(chat_id: str) -> str:
    return f"/{ROUTE_NAMESPACE}/{chat_id}"
