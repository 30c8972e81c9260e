# sandbox.py
"""
Access to the per-conversation sandbox workspace where the coding agent writes
its game files.

Only a few primitives are needed: read a file, list a directory, run a
command. `LocalSandbox` implements them on a plain directory; anything else
exposing the same three methods can be passed instead.
"""
from __future__ import annotations

import logging
import posixpath
import subprocess
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from .data_class import ExecResult
from .errors import SandboxError

logger = logging.getLogger(__name__)


class Sandbox(Protocol):
    def read_file(self, path: str) -> Optional[str]: ...

    def list_dir(self, path: str) -> List[str]: ...

    def exec(self, argv: Sequence[str]) -> ExecResult: ...


class LocalSandbox:
    """A sandbox backed by a local workspace directory. Commands run with the workspace as cwd."""

    def __init__(self, root: Path | str):
        self.root = Path(root).resolve()

    def _resolve(self, path: str) -> Path:
        target = (self.root / path).resolve()
        if target != self.root and self.root not in target.parents:
            raise SandboxError(f"Path escapes sandbox: {path}")
        return target

    def read_file(self, path: str) -> Optional[str]:
        target = self._resolve(path)
        if not target.is_file():
            return None
        try:
            return target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SandboxError(f"Cannot read {path}: {e}") from e

    def list_dir(self, path: str) -> List[str]:
        target = self._resolve(path)
        if not target.is_dir():
            return []
        return sorted(p.name for p in target.iterdir())

    def exec(self, argv: Sequence[str]) -> ExecResult:
        if not self.root.is_dir():
            raise SandboxError(f"Sandbox workspace not found: {self.root}")
        try:
            proc = subprocess.run(
                list(argv),
                cwd=self.root,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise SandboxError(f"{argv[0]} failed to start: {e}") from e
        return ExecResult(exit_code=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)


def file_exists(sandbox: Sandbox, path: str) -> bool:
    # Probe via the listing: archives are binary and cannot be read as text
    parent, name = posixpath.split(path)
    try:
        return name in sandbox.list_dir(parent or ".")
    except Exception:
        return False


def safe_read_file(sandbox: Sandbox, path: str) -> str:
    """Read a file, returning "" if it is missing or unreadable."""
    try:
        return sandbox.read_file(path) or ""
    except Exception:
        return ""


def run_checked(sandbox: Sandbox, argv: Sequence[str], ok_codes: Sequence[int] = (0,)) -> ExecResult:
    result = sandbox.exec(argv)
    logger.debug("exec %s -> %d", list(argv), result.exit_code)
    if result.exit_code not in ok_codes:
        detail = (result.stderr or result.stdout).strip()
        raise SandboxError(f"{' '.join(argv)} exited with {result.exit_code}: {detail}")
    return result
