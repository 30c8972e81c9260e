"""Shared fixtures: an in-memory sandbox and page service standing in for the real collaborators."""
import io
import posixpath
import zipfile
from typing import Dict, List, Optional, Union

import pytest

from game_crafter.data_class import ExecResult
from game_crafter.errors import PageServiceError


class FakeSandbox:
    """Dict-backed sandbox. Understands the few commands the reader runs: mkdir, unzip, ls, rm."""

    def __init__(
        self,
        files: Optional[Dict[str, Union[str, bytes]]] = None,
        fail_unzip: bool = False,
        unzip_warning: bool = False,
    ):
        self.files: Dict[str, Union[str, bytes]] = dict(files or {})
        self.dirs = set()
        self.fail_unzip = fail_unzip
        self.unzip_warning = unzip_warning
        self.commands: List[List[str]] = []

    def read_file(self, path: str) -> Optional[str]:
        content = self.files.get(path)
        if isinstance(content, bytes):
            return content.decode("utf-8")
        return content

    def list_dir(self, path: str) -> List[str]:
        prefix = "" if path in ("", ".") else path.rstrip("/") + "/"
        names = set()
        for key in list(self.files) + list(self.dirs):
            if key.startswith(prefix) and key != prefix.rstrip("/"):
                names.add(key[len(prefix):].split("/")[0])
        return sorted(names)

    def exec(self, argv) -> ExecResult:
        argv = list(argv)
        self.commands.append(argv)
        cmd = argv[0]
        if cmd == "mkdir":
            self.dirs.add(argv[-1])
            return ExecResult(0)
        if cmd == "unzip":
            if self.fail_unzip:
                return ExecResult(9, stderr="End-of-central-directory signature not found.")
            archive, dest = argv[2], argv[4]
            with zipfile.ZipFile(io.BytesIO(self.files[archive])) as zf:
                for name in zf.namelist():
                    self.files[posixpath.join(dest, name)] = zf.read(name).decode("utf-8")
            if self.unzip_warning:
                return ExecResult(1, stderr="warning:  stripped absolute path spec from /game.html")
            return ExecResult(0)
        if cmd == "ls":
            return ExecResult(0, stdout="\n".join(self.list_dir(argv[-1])))
        if cmd == "rm":
            target = argv[-1]
            self.dirs.discard(target)
            for key in [k for k in self.files if k.startswith(target + "/")]:
                del self.files[key]
            return ExecResult(0)
        return ExecResult(127, stderr=f"{cmd}: command not found")

    def exists(self, path: str) -> bool:
        return path in self.dirs or any(k == path or k.startswith(path + "/") for k in self.files)


class InMemoryPageService:
    """Stores page sources by route with overwrite semantics, like the real service."""

    def __init__(self, fail_save: Optional[str] = None, fail_compile: Optional[str] = None):
        self.pages: Dict[str, dict] = {}
        self.built: List[str] = []
        self.calls: List[tuple] = []
        self.fail_save = fail_save
        self.fail_compile = fail_compile

    def save_page_source(self, app_id, template_id, route, source):
        self.calls.append(("save", app_id, template_id, route))
        if self.fail_save:
            raise PageServiceError(self.fail_save)
        self.pages[route] = source
        return {"route": route}

    def compile_page(self, app_id, template_id, route, option):
        self.calls.append(("compile", app_id, template_id, route, option))
        if self.fail_compile:
            raise PageServiceError(self.fail_compile)
        self.built.append(route)


def make_zip(files: Dict[str, str]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    return buf.getvalue()


COMBINED_HTML = """<!doctype html>
<html>
<head>
  <title>Sky Dodger</title>
  <link rel="preconnect" href="https://fonts.gstatic.com">
  <link href="https://fonts.googleapis.com/css2?family=Press+Start+2P&display=swap" rel="stylesheet">
  <link rel="stylesheet" href="https://cdn.example.com/reset.css">
  <style>body { background: #000; }</style>
</head>
<body>
  <canvas id="game" width="320" height="240"></canvas>
  <div id="score">0</div>
  <script src="https://cdn.example.com/lib.js"></script>
  <script>
const canvas = document.getElementById('game');
const ctx = canvas.getContext('2d');
  </script>
</body>
</html>
"""

GAME_CSS = "#game { border: 1px solid #fff; }"
GAME_JS = "const score = document.getElementById('score');\nscore.textContent = '10';"


@pytest.fixture
def combined_html():
    return COMBINED_HTML


@pytest.fixture
def page_service():
    return InMemoryPageService()
