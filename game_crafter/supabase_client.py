# supabase_client.py
from __future__ import annotations

import os

from supabase import create_client, Client

from . import config  # noqa: F401  (loads .env)


def get_supabase() -> Client:
    url = os.getenv("SUPABASE_URL")
    key = os.getenv("SUPABASE_SERVICE_ROLE_KEY")  # server-side only
    if not url or not key:
        raise RuntimeError("SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY not set. Put them in .env")
    return create_client(url, key)


def public_url(path: str) -> str:
    # For public buckets you can derive the URL directly:
    base = os.environ["SUPABASE_URL"].rstrip("/")
    return f"{base}/storage/v1/object/public/{path.lstrip('/')}"
