from .data_class import BuildResult, GameFiles, PageIdentity, PageResult, PageSource, PublishReport
from .extract import extract_body_content, extract_font_imports, extract_from_single_file
from .pages import PageService, build_game_page, create_game_page
from .pipeline import publish_from_sandbox
from .reconcile import build_page_source, read_game_files, reconcile
from .sandbox import LocalSandbox, Sandbox
from .wrap import is_already_wrapped, wrap_js_for_page

__all__ = [
    "BuildResult",
    "GameFiles",
    "LocalSandbox",
    "PageIdentity",
    "PageResult",
    "PageService",
    "PageSource",
    "PublishReport",
    "Sandbox",
    "build_game_page",
    "build_page_source",
    "create_game_page",
    "extract_body_content",
    "extract_font_imports",
    "extract_from_single_file",
    "is_already_wrapped",
    "publish_from_sandbox",
    "read_game_files",
    "reconcile",
    "wrap_js_for_page",
]
