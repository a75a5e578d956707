"""RecordStore — the in-memory diagram.

Owns every :class:`~wirectl.domain.model.Module`. Lookup is by exact,
case-sensitive name; creation appends, so iteration follows first
reference (or document order when loaded from disk).
"""

from __future__ import annotations

from collections.abc import Iterator

from wirectl.domain.model import Module, Port


class RecordStore:
    """Ordered collection of modules with find-or-create semantics."""

    def __init__(self) -> None:
        self._modules: dict[str, Module] = {}

    def __iter__(self) -> Iterator[Module]:
        return iter(self._modules.values())

    def __len__(self) -> int:
        return len(self._modules)

    def __contains__(self, name: object) -> bool:
        return name in self._modules

    def find_or_create_module(self, name: str, *, create: bool = False) -> Module | None:
        """Look up a module by name, appending a new empty one when *create* is set.

        Returns None for an empty name, or when the module is absent and
        *create* is False. Never mutates the store unless it creates.
        """
        if not name:
            return None
        module = self._modules.get(name)
        if module is None and create:
            module = Module(name=name)
            self._modules[name] = module
        return module

    def find_or_create_port(
        self, module: Module | None, name: str, *, create: bool = False
    ) -> Port | None:
        """Look up a port within *module*; same contract as :meth:`find_or_create_module`."""
        if module is None:
            return None
        return module.find_or_create_port(name, create=create)

    def links(self) -> Iterator[tuple[Module, Port]]:
        """Yield ``(module, port)`` for every OUT port with a live destination."""
        for module in self._modules.values():
            for port in module:
                if port.destination is not None:
                    yield module, port
