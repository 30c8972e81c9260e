# supabase_pages.py
"""
Page storage / build service on Supabase.

Page sources live in a table keyed by route (upsert = overwrite, last write
wins). Building reads the row back, renders one complete HTML document and
uploads it to a public bucket at `<route>/index.html`.
"""
from __future__ import annotations

import html as html_lib
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from supabase import Client

from .config import get_pages_bucket, get_pages_table
from .errors import PageServiceError
from .supabase_client import get_supabase, public_url

logger = logging.getLogger(__name__)

__all__ = ["SupabasePageService", "render_document"]


class SupabasePageService:
    def __init__(
        self,
        client: Optional[Client] = None,
        table: Optional[str] = None,
        bucket: Optional[str] = None,
    ):
        self.client = client or get_supabase()
        self.table = table or get_pages_table()
        self.bucket = bucket or get_pages_bucket()

    def save_page_source(self, app_id: str, template_id: str, route: str, source: Dict[str, Any]) -> Dict[str, Any]:
        flags = source.get("need_to_save", {})
        row: Dict[str, Any] = {
            "route": route,
            "app_id": app_id,
            "template_id": template_id,
            "uid": source.get("uid"),
            "updated_at": datetime.utcnow().isoformat() + "Z",
        }
        if flags.get("page"):
            row["page"] = source["page"]["source"]
        if flags.get("style"):
            row["style"] = source["style"]["source"]
        if flags.get("script"):
            row["script"] = source["script"]["source"]
        if flags.get("setting"):
            row["title"] = source["setting"].get("title")

        # 'upsert' replaces the row for this route, so re-publishing overwrites.
        self.client.table(self.table).upsert(row, on_conflict="route").execute()
        return row

    def compile_page(self, app_id: str, template_id: str, route: str, option: Dict[str, Any]) -> str:
        res = (
            self.client.table(self.table)
            .select("*")
            .eq("route", route)
            .eq("app_id", app_id)
            .limit(1)
            .execute()
        )
        rows = res.data or []
        if not rows:
            raise PageServiceError(f"Page not found: {route}")
        page = rows[0]

        document = render_document(
            title=page.get("title") or "",
            markup=page.get("page") or "",
            style=page.get("style") or "",
            script=page.get("script") or "",
        )
        path = self.document_path(route)
        logger.info("Uploading rendered page to %s/%s (ssr=%s)", self.bucket, path, option.get("ssr", False))
        self.client.storage.from_(self.bucket).upload(
            path=path,
            file=document.encode("utf-8"),
            file_options={"content-type": "text/html", "upsert": "true"},
        )
        return public_url(f"{self.bucket}/{path}")

    @staticmethod
    def document_path(route: str) -> str:
        return f"{route.strip('/')}/index.html"


def render_document(*, title: str, markup: str, style: str, script: str) -> str:
    """Assemble the published document. The script goes after the markup so init() finds its elements."""
    return f"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{html_lib.escape(title)}</title>
<style>
{style}
</style>
</head>
<body>
{markup}
<script>
{script}
</script>
</body>
</html>
"""
