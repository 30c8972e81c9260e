# extract.py
"""
Best-effort extraction of style, script and body markup from an AI-generated
HTML document.

Everything here is regex based on purpose: the input is whatever the model
wrote, so each function has a plain fallback instead of an error path.
"""
from __future__ import annotations

import html as html_lib
import re
from typing import List, Optional, Tuple

_STYLE_BLOCK = re.compile(r"<style[^>]*>([\s\S]*?)</style>", re.IGNORECASE)
_SCRIPT_BLOCK = re.compile(r"<script[^>]*>([\s\S]*?)</script>", re.IGNORECASE)
_HEAD = re.compile(r"<head[^>]*>([\s\S]*?)</head>", re.IGNORECASE)
_BODY = re.compile(r"<body[^>]*>([\s\S]*?)</body>", re.IGNORECASE)
_TITLE = re.compile(r"<title[^>]*>(.*?)</title>", re.IGNORECASE | re.DOTALL)

# <link rel="stylesheet" href="https://fonts.googleapis.com/css2?family=..."> in any attribute order
_LINK_TAG = re.compile(r"<link\b[^>]*>", re.IGNORECASE)
_HREF = re.compile(r"""\shref\s*=\s*["']([^"']+)["']""", re.IGNORECASE)
_STYLESHEET_REL = re.compile(r"""\srel\s*=\s*["']?stylesheet\b""", re.IGNORECASE)
_FONT_HOST = re.compile(r"^(?:https?:)?//fonts\.googleapis\.com/", re.IGNORECASE)


def extract_from_single_file(html: str) -> Tuple[str, str]:
    """
    Pull inline CSS and JS out of a combined HTML document.

    Returns (css, js). Blocks are newline-joined in source order. A <script>
    that only points at an external src has no inline body and is skipped.
    """
    css = "\n".join(_STYLE_BLOCK.findall(html))
    js = "\n".join(body for body in _SCRIPT_BLOCK.findall(html) if body.strip())
    return css, js


def extract_font_imports(html: str) -> str:
    """
    Convert Google Fonts <link> tags found in <head> into CSS @import lines.
    Links outside a recognizable <head> are ignored.
    """
    head = _HEAD.search(html)
    if not head:
        return ""

    imports: List[str] = []
    for tag in _LINK_TAG.findall(head.group(1)):
        href = _HREF.search(tag)
        if href and _STYLESHEET_REL.search(tag) and _FONT_HOST.match(href.group(1)):
            imports.append(f"@import url('{href.group(1)}');")
    return "\n".join(imports)


def extract_body_content(html: str) -> str:
    """Body markup without <style>/<script> blocks, or the whole document if there is no <body>."""
    body = _BODY.search(html)
    content = body.group(1) if body else html

    # They are published separately as the page style and script
    content = _STYLE_BLOCK.sub("", content)
    content = _SCRIPT_BLOCK.sub("", content)
    return content.strip()


def extract_title_from_html(html: str) -> Optional[str]:
    m = _TITLE.search(html)
    if m:
        return html_lib.unescape(m.group(1)).strip() or None
    return None
