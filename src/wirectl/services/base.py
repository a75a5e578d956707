"""BaseService — foundation for all wirectl services.

Every service receives a :class:`Workspace` at construction time and
works on ``self._workspace.store``. Services never save; the command
layer persists the store once the command finishes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wirectl.domain.store import RecordStore
    from wirectl.infrastructure.workspace import Workspace


class BaseService:
    """Base for service-layer classes.

    Usage::

        class LinkService(BaseService):
            def add(self, source: str, dest: str) -> ServiceResult:
                module = self._store.find_or_create_module(...)
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @property
    def _store(self) -> RecordStore:
        return self._workspace.store
