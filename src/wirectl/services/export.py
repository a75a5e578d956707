"""ExportService — Graphviz diagram export.

Writes the DOT file, then hands it to the workspace renderer for an
image. Rendering is best-effort: any renderer failure becomes a warning
and the DOT file is still reported as written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from wirectl.infrastructure.dot import graph_to_dot
from wirectl.infrastructure.renderer import RenderError
from wirectl.services.base import BaseService
from wirectl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class ExportService(BaseService):
    """Export the diagram for an external layout tool."""

    def export_dot(
        self,
        *,
        output: Path | None = None,
        image: Path | None = None,
        fmt: str | None = None,
        render: bool = True,
    ) -> ServiceResult:
        """Write the diagram as DOT and optionally render it to an image.

        Args:
            output: DOT file path; defaults to ``export.dot_file``.
            image: Image path; defaults to ``export.image_file`` with its
                suffix matched to *fmt*.
            fmt: Image format; defaults to ``export.image_format``.
            render: Skip the renderer entirely when False.
        """
        cfg = self._workspace.settings.export
        fmt = fmt or cfg.image_format
        dot_path = self._workspace.resolve(output or cfg.dot_file)
        if image is not None:
            image_path = self._workspace.resolve(image)
        else:
            image_path = self._workspace.resolve(cfg.image_file).with_suffix(f".{fmt}")

        g = self._workspace.graph.graph
        content = graph_to_dot(g, rankdir=cfg.rankdir, font=cfg.font)
        try:
            dot_path.parent.mkdir(parents=True, exist_ok=True)
            dot_path.write_text(content, encoding="utf-8")
        except OSError as exc:
            return ServiceResult.failure(
                "export_dot",
                "WRITE_FAILED",
                f"Cannot write {dot_path}: {exc}",
                path=str(dot_path),
            )
        logger.debug("Wrote DOT graph to %s", dot_path)

        warnings: list[str] = []
        rendered = False
        renderer = self._workspace.renderer
        if render and renderer is not None:
            try:
                renderer(dot_path, image_path, fmt)
                rendered = True
            except RenderError as exc:
                logger.debug("Rendering %s failed: %s", dot_path, exc)
                warnings.append(f"Image not rendered: {exc}")

        payload: dict[str, Any] = {
            "output_file": str(dot_path),
            "image_file": str(image_path) if rendered else None,
            "format": fmt,
            "rendered": rendered,
            "node_count": g.number_of_nodes(),
            "edge_count": g.number_of_edges(),
            "content": content,
        }
        return ServiceResult(ok=True, op="export_dot", data=payload, warnings=warnings)
