"""Image renderers — turn a DOT file into a picture.

Rendering is best-effort: callers catch :class:`RenderError` and report it
as a warning. Any callable matching :class:`Renderer` can be injected into
the workspace, which keeps export testable without Graphviz installed.

All subprocess calls are wrapped so a missing binary never surfaces as
anything other than :class:`RenderError`.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """The renderer could not produce an image."""


class Renderer(Protocol):
    """Convert *source* (DOT) into *target* in image format *fmt*."""

    def __call__(self, source: Path, target: Path, fmt: str) -> None: ...


class GraphvizRenderer:
    """Shell out to a Graphviz layout command (``dot`` by default)."""

    def __init__(self, command: str = "dot", *, timeout: float = 30) -> None:
        self.command = command
        self.timeout = timeout

    def __call__(self, source: Path, target: Path, fmt: str) -> None:
        executable = shutil.which(self.command)
        if executable is None:
            msg = f"Graphviz command not found: {self.command}"
            raise RenderError(msg)

        args = [executable, f"-T{fmt}", str(source), "-o", str(target)]
        logger.debug("Running renderer: %s", " ".join(args))
        try:
            subprocess.run(
                args,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit code {exc.returncode}"
            msg = f"{self.command} failed: {detail}"
            raise RenderError(msg) from exc
        except subprocess.TimeoutExpired as exc:
            msg = f"{self.command} timed out after {self.timeout}s"
            raise RenderError(msg) from exc
        except OSError as exc:
            msg = f"{self.command} could not be run: {exc}"
            raise RenderError(msg) from exc
