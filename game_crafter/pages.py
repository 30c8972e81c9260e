# pages.py
"""
Publishing a normalized page source through the page storage / build service.

The service is a collaborator: `save_page_source` stores (overwrites) the
source for a route and `compile_page` renders it. Scripts on the published
page execute before the markup is attached, which is why the script in a
PageSource is always init()-wrapped (see wrap.py).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Protocol

from .config import get_app_id, get_template_id
from .data_class import BuildResult, PageIdentity, PageResult, PageSource

logger = logging.getLogger(__name__)

__all__ = ["PageService", "build_source_payload", "create_game_page", "build_game_page"]


class PageService(Protocol):
    def save_page_source(self, app_id: str, template_id: str, route: str, source: Dict[str, Any]) -> Any: ...

    def compile_page(self, app_id: str, template_id: str, route: str, option: Dict[str, Any]) -> Any: ...


def build_source_payload(identity: PageIdentity, source: PageSource) -> Dict[str, Any]:
    return {
        "uid": identity.chat_id,
        "page": {"source": source.markup, "language": "html"},
        "style": {"source": source.style, "language": "css"},
        "script": {"source": source.script, "language": "javascript"},
        "setting": {"title": identity.page_title},
        "need_to_save": {
            "page": True,
            "style": True,
            "script": True,
            "setting": True,
        },
    }


def create_game_page(identity: PageIdentity, source: PageSource, service: PageService) -> PageResult:
    """Save (create or overwrite) the page at identity.route. Failures come back as data."""
    route = identity.route
    app_id, template_id = get_app_id(), get_template_id()

    try:
        logger.info("Saving page source: %s, %s, %s", app_id, template_id, route)
        saved = service.save_page_source(app_id, template_id, route, build_source_payload(identity, source))
        logger.info("Page saved at %s: %s", route, saved)
        return PageResult(success=True, route=route, url=route)
    except Exception as e:
        logger.error("Failed to create page %s: %s", route, e)
        return PageResult(success=False, route=route, url=route, error=str(e))


def build_game_page(route: str, service: PageService) -> BuildResult:
    """Server-render the page at `route`. A failed build leaves the saved source in place."""
    app_id, template_id = get_app_id(), get_template_id()

    try:
        logger.info("Building page: %s", route)
        service.compile_page(app_id, template_id, route, {"ssr": True})
        logger.info("Page built successfully: %s", route)
        return BuildResult(success=True)
    except Exception as e:
        logger.error("Failed to build page %s: %s", route, e)
        return BuildResult(success=False, error=str(e))
