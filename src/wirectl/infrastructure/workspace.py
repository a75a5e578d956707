"""Workspace — the single dependency injected into every service.

Owns the resolved file locations, the loaded :class:`RecordStore`, the
graph engine built over it, and the image renderer. The store is read
lazily on first access and written back by :meth:`save`; nothing is
persisted part-way through a command.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from wirectl.infrastructure.graph.engine import GraphEngine
from wirectl.infrastructure.persistence import load_store, save_store
from wirectl.infrastructure.renderer import GraphvizRenderer

if TYPE_CHECKING:
    from wirectl.config.settings import WireSettings
    from wirectl.domain.store import RecordStore
    from wirectl.infrastructure.renderer import Renderer

_DEFAULT = object()


class Workspace:
    """File-backed diagram session.

    Args:
        settings: Resolved settings; paths are relative to
            ``settings.workspace_root``.
        renderer: Image renderer override. Defaults to a
            :class:`GraphvizRenderer` built from ``settings.renderer``;
            pass None to disable rendering.
    """

    def __init__(
        self,
        settings: WireSettings,
        *,
        renderer: Renderer | None | object = _DEFAULT,
    ) -> None:
        self._settings = settings
        self._root = settings.workspace_root
        self._store: RecordStore | None = None
        self._graph: GraphEngine | None = None

        if renderer is _DEFAULT:
            cfg = settings.renderer
            renderer = GraphvizRenderer(cfg.command, timeout=cfg.timeout) if cfg.enabled else None
        self.renderer: Renderer | None = renderer  # type: ignore[assignment]

    @property
    def settings(self) -> WireSettings:
        return self._settings

    @property
    def data_path(self) -> Path:
        """The backing diagram file."""
        return self.resolve(self._settings.storage.data_file)

    def resolve(self, path: str | Path) -> Path:
        """Resolve *path* against the workspace root (absolute paths pass through)."""
        return self._root / Path(path).expanduser()

    @property
    def loaded(self) -> bool:
        """True once the store has been read from disk."""
        return self._store is not None

    @property
    def store(self) -> RecordStore:
        """The diagram (read from :attr:`data_path` on first access)."""
        if self._store is None:
            self._store = load_store(self.data_path)
        return self._store

    @property
    def graph(self) -> GraphEngine:
        """Graph engine over the current store."""
        if self._graph is None:
            self._graph = GraphEngine(self.store)
        return self._graph

    def save(self) -> None:
        """Write the store back to :attr:`data_path`. No-op if never loaded."""
        if self._store is None:
            return
        save_store(self._store, self.data_path)
