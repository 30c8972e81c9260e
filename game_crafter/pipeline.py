# pipeline.py
"""
End-to-end publishing of a sandbox workspace.

Flow:
    sandbox (game.zip | game.html[+css/js])
        -> reconcile.reconcile()        (PageSource or None)
        -> pages.create_game_page()     (save / overwrite at /ai/<chat_id>)
        -> pages.build_game_page()      (server render)

Every outcome is returned as a PublishReport; nothing is raised past here.
"""
from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Optional

from .data_class import PageIdentity, PublishReport
from .extract import extract_title_from_html
from .pages import PageService, build_game_page, create_game_page
from .reconcile import build_page_source, read_game_files
from .sandbox import Sandbox

logger = logging.getLogger(__name__)

__all__ = ["publish_from_sandbox"]


def publish_from_sandbox(
    sandbox: Sandbox,
    chat_id: Optional[str],
    service: PageService,
    title: Optional[str] = None,
) -> PublishReport:
    started = time.monotonic()
    try:
        report = _publish(sandbox, chat_id, service, title)
    except Exception as e:
        logger.exception("Unexpected failure while publishing %s", chat_id)
        report = PublishReport(status="error", chat_id=chat_id, error=str(e), messages=[f"❌ {e}"])

    duration_ms = int((time.monotonic() - started) * 1000)
    logger.info("Publish %s for %s took %d ms", report.status, chat_id, duration_ms)
    return replace(report, duration_ms=duration_ms)


def _publish(
    sandbox: Sandbox,
    chat_id: Optional[str],
    service: PageService,
    title: Optional[str],
) -> PublishReport:
    files = read_game_files(sandbox)
    if files is None:
        logger.warning("No game files found; nothing to publish")
        return PublishReport(status="skipped", chat_id=chat_id)

    if not chat_id:
        logger.error("chat_id not available")
        return PublishReport(status="error", error="chat_id not available")

    identity = PageIdentity(chat_id=chat_id, title=title or extract_title_from_html(files.html))
    source = build_page_source(files)

    page = create_game_page(identity, source, service)
    if not page.success:
        return PublishReport(
            status="error",
            chat_id=chat_id,
            route=page.route,
            error=page.error,
            messages=[f"❌ Failed to create game page: {page.error}"],
        )

    messages = []
    build = build_game_page(page.route, service)
    if not build.success:
        # The saved (unbuilt) page is still better than no page
        messages.append(f"⚠️ Game page created but build failed: {build.error}")

    # Timestamp defeats caching of the previous turn's page
    url = f"{page.url}?t={int(time.time() * 1000)}"
    messages.append(f"🎮 **Game Ready!** [Open Game]({url})")

    return PublishReport(
        status="success",
        chat_id=chat_id,
        route=page.route,
        url=url,
        messages=messages,
        error=build.error,
    )
