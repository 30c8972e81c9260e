# wrap.py
"""
Deferred-initialization wrapping for page scripts.

The page host runs the page script before the markup fragment is attached to
the document, so top-level code such as document.getElementById('game') can
see nothing. Wrapping the code in `function init() {...}` followed by an
explicit `init();` call moves it after attachment.
"""
from __future__ import annotations

import re

# Leading comment lines / whitespace, then `function init() {` or `function main() {`
_ENTRY_DEF = re.compile(r"\A(?:\s|//[^\n]*\n)*function\s+(init|main)\s*\(\s*\)\s*\{")


def _last_code_line(js: str) -> str:
    for line in reversed(js.splitlines()):
        line = line.strip()
        if line and not line.startswith("//"):
            return line
    return ""


def is_already_wrapped(js: str) -> bool:
    """True when the code defines init()/main() up front AND calls that same function last."""
    trimmed = js.strip()
    m = _ENTRY_DEF.match(trimmed)
    if not m:
        return False
    name = m.group(1)
    # A call inside a trailing comment does not count
    return re.search(rf"\b{name}\s*\(\s*\)\s*;?\Z", _last_code_line(trimmed)) is not None


def wrap_js_for_page(js: str) -> str:
    if is_already_wrapped(js):
        return js
    return f"function init() {{\n{js}\n}}\n\ninit();"
