"""InspectService — read-only views of the diagram (list, draw)."""

from __future__ import annotations

from typing import Any

from wirectl.domain.types import Direction
from wirectl.services.base import BaseService
from wirectl.services.result import ServiceResult


class InspectService(BaseService):
    """Query modules and ports without mutating the store."""

    def list_module(self, name: str) -> ServiceResult:
        """Return every port of module *name* in insertion order."""
        module = self._store.find_or_create_module(name)
        if module is None:
            return ServiceResult.failure(
                "list_module", "NOT_FOUND", f"Module not found: {name}", module=name
            )
        ports = [port.to_dict() for port in module]
        return ServiceResult(
            ok=True,
            op="list_module",
            data={"module": module.name, "ports": ports, "count": len(ports)},
        )

    def draw(self) -> ServiceResult:
        """Return the text-diagram view: each module with its linked ports.

        Ports that are neither IN nor OUT are left out.
        """
        modules: list[dict[str, Any]] = []
        for module in self._store:
            ports = [p.to_dict() for p in module if p.direction is not Direction.NONE]
            modules.append({"name": module.name, "ports": ports})
        link_count = sum(1 for _ in self._store.links())
        return ServiceResult(
            ok=True,
            op="draw",
            data={"modules": modules, "module_count": len(modules), "link_count": link_count},
        )
