#!/usr/bin/env python3
"""
Publish a sandbox workspace as a game page.

Usage:
  python -m game_crafter --workspace ./workspaces/abc123 --chat-id abc123
  python -m game_crafter --chat-id abc123 --title "Sky Dodger"
"""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List, Optional

from .config import configure_logging, get_sandbox_root
from .pipeline import publish_from_sandbox
from .sandbox import LocalSandbox
from .supabase_pages import SupabasePageService


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Publish a generated game workspace as a page.")
    parser.add_argument("--chat-id", required=True, help="Conversation id; the page is published at /ai/<chat-id>")
    parser.add_argument("--workspace", default=None, help="Workspace directory (default: $SANDBOX_ROOT/<chat-id>)")
    parser.add_argument("--title", default=None, help="Page title (default: the game's <title>)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging()

    workspace = Path(args.workspace) if args.workspace else get_sandbox_root() / args.chat_id
    report = publish_from_sandbox(
        LocalSandbox(workspace),
        args.chat_id,
        SupabasePageService(),
        title=args.title,
    )
    print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    return 1 if report.status == "error" else 0


if __name__ == "__main__":
    raise SystemExit(main())
