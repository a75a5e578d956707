"""Modules and ports — the entities of a wiring diagram.

A :class:`Module` owns its ports exclusively. Links are recorded only on
the source side: an OUT port carries the ``(module, port)`` pair it feeds,
an IN port carries nothing. Iteration order is insertion order.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from wirectl.domain.types import UNKNOWN_TYPE, Direction


@dataclass
class Port:
    """A named, typed attachment point on a module."""

    name: str
    type: str = UNKNOWN_TYPE
    direction: Direction = Direction.NONE
    dest_module: str = ""
    dest_port: str = ""

    @property
    def destination(self) -> tuple[str, str] | None:
        """The ``(module, port)`` this port feeds, or None when it feeds nothing."""
        if self.direction is Direction.OUT and self.dest_module:
            return self.dest_module, self.dest_port
        return None

    def link_to(self, module: str, port: str) -> None:
        """Make this port the source of a link to ``module::port``."""
        self.direction = Direction.OUT
        self.dest_module = module
        self.dest_port = port

    def mark_input(self) -> None:
        """Make this port a link target, dropping any link it was the source of."""
        self.direction = Direction.IN
        self.dest_module = ""
        self.dest_port = ""

    def unlink(self) -> None:
        """Reset the port to unconnected."""
        self.direction = Direction.NONE
        self.dest_module = ""
        self.dest_port = ""

    def to_dict(self) -> dict[str, str | None]:
        dest = self.destination
        return {
            "name": self.name,
            "type": self.type,
            "direction": str(self.direction),
            "destination": f"{dest[0]}::{dest[1]}" if dest else None,
        }


@dataclass
class Module:
    """A named entity owning an ordered set of ports."""

    name: str
    _ports: dict[str, Port] = field(default_factory=dict, repr=False)

    def __iter__(self) -> Iterator[Port]:
        return iter(self._ports.values())

    def __len__(self) -> int:
        return len(self._ports)

    def ports_by_direction(self, direction: Direction) -> list[Port]:
        """Ports with the given direction, in insertion order."""
        return [p for p in self._ports.values() if p.direction is direction]

    def find_or_create_port(self, name: str, *, create: bool = False) -> Port | None:
        """Look up a port by name, appending a fresh one when *create* is set.

        Returns None for an empty name, or when the port is absent and
        *create* is False. New ports start with the unknown type, NONE
        direction and no destination.
        """
        if not name:
            return None
        port = self._ports.get(name)
        if port is None and create:
            port = Port(name=name)
            self._ports[name] = port
        return port
