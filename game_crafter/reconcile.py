# reconcile.py
from __future__ import annotations

import logging
from typing import Optional

from .data_class import GameFiles, PageSource
from .extract import extract_body_content, extract_font_imports, extract_from_single_file
from .sandbox import Sandbox, file_exists, run_checked, safe_read_file
from .wrap import wrap_js_for_page

logger = logging.getLogger(__name__)

ARCHIVE_NAME = "game.zip"
HTML_NAME = "game.html"
CSS_NAME = "game.css"
JS_NAME = "game.js"
EXTRACT_DIR = "game_extracted"

__all__ = ["read_game_files", "build_page_source", "reconcile"]


# -------------------- Reading --------------------

def read_game_files(sandbox: Sandbox) -> Optional[GameFiles]:
    """
    Read the game artifacts from the sandbox: game.zip first, then the
    individual game.html/.css/.js files. Returns None when nothing usable exists.
    """
    if file_exists(sandbox, ARCHIVE_NAME):
        logger.info("Found %s, extracting...", ARCHIVE_NAME)
        files = _read_from_zip(sandbox)
        if files:
            return files

    if file_exists(sandbox, HTML_NAME):
        logger.info("Found individual game files")
        return _read_individual_files(sandbox)

    logger.warning("No game files found in sandbox")
    return None


def _read_from_zip(sandbox: Sandbox) -> Optional[GameFiles]:
    try:
        run_checked(sandbox, ["mkdir", "-p", EXTRACT_DIR])
        # unzip exits 1 on warnings (e.g. stripped absolute paths); the files are still extracted
        unzipped = run_checked(sandbox, ["unzip", "-o", ARCHIVE_NAME, "-d", EXTRACT_DIR], ok_codes=(0, 1))
        if unzipped.exit_code == 1:
            logger.warning("unzip warning: %s", (unzipped.stderr or unzipped.stdout).strip())
        logger.info("Extracted files: %s", sandbox.list_dir(EXTRACT_DIR))

        html = sandbox.read_file(f"{EXTRACT_DIR}/{HTML_NAME}")
        if not html:
            logger.error("%s has no %s", ARCHIVE_NAME, HTML_NAME)
            return None
        css = safe_read_file(sandbox, f"{EXTRACT_DIR}/{CSS_NAME}")
        js = safe_read_file(sandbox, f"{EXTRACT_DIR}/{JS_NAME}")
        logger.info("Read from archive: html=%d css=%d js=%d bytes", len(html), len(css), len(js))
        return GameFiles(html=html, css=css, js=js)
    except Exception as e:
        logger.error("Failed to read %s: %s", ARCHIVE_NAME, e)
        return None
    finally:
        _remove_extract_dir(sandbox)


def _remove_extract_dir(sandbox: Sandbox) -> None:
    try:
        run_checked(sandbox, ["rm", "-rf", EXTRACT_DIR])
    except Exception as e:
        logger.error("Failed to remove %s: %s", EXTRACT_DIR, e)


def _read_individual_files(sandbox: Sandbox) -> Optional[GameFiles]:
    try:
        html = sandbox.read_file(HTML_NAME)
    except Exception as e:
        logger.error("Failed to read individual files: %s", e)
        return None
    if not html:
        logger.error("%s is empty or not found", HTML_NAME)
        return None

    return GameFiles(
        html=html,
        css=safe_read_file(sandbox, CSS_NAME),
        js=safe_read_file(sandbox, JS_NAME),
    )


# -------------------- Normalizing --------------------

def build_page_source(files: GameFiles) -> PageSource:
    """
    Turn raw artifacts into the page triple.

    Explicit game.css / game.js win over blocks extracted from game.html; the
    two are never merged. Font imports from the HTML head always go first in
    the style, and the script always goes through the init() wrapper.
    """
    markup = extract_body_content(files.html)
    extracted_css, extracted_js = extract_from_single_file(files.html)

    style = files.css or extracted_css
    font_imports = extract_font_imports(files.html)
    if font_imports:
        style = f"{font_imports}\n\n{style}"

    script = wrap_js_for_page(files.js or extracted_js)
    return PageSource(markup=markup, style=style, script=script)


def reconcile(sandbox: Sandbox) -> Optional[PageSource]:
    files = read_game_files(sandbox)
    if files is None:
        return None
    return build_page_source(files)
