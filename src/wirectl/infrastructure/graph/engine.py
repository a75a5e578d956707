"""GraphEngine — lazy-built NetworkX graph from the RecordStore.

One node per module, one edge per live OUT link. The graph is a
``MultiDiGraph`` because two modules may be joined by several port
pairs; each edge is keyed by its source port name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

import networkx as nx

from wirectl.domain.types import Direction

if TYPE_CHECKING:
    from wirectl.domain.store import RecordStore

_Graph: TypeAlias = nx.MultiDiGraph


class GraphEngine:
    """Lazy-loading link graph backed by the in-memory store."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store
        self._graph: _Graph | None = None

    @property
    def graph(self) -> _Graph:
        """Return the graph, building from the store on first access."""
        if self._graph is None:
            self._graph = self._build_from_store()
        return self._graph

    def invalidate(self) -> None:
        """Clear the cached graph, forcing rebuild on next access."""
        self._graph = None

    def _build_from_store(self) -> _Graph:
        """Build the graph.

        All modules are added first so port-less and unlinked modules
        still become nodes. An edge whose destination module was never
        stored adds a bare node for it.
        """
        g: _Graph = nx.MultiDiGraph()
        for module in self._store:
            g.add_node(
                module.name,
                in_ports=[p.name for p in module.ports_by_direction(Direction.IN)],
                out_ports=[p.name for p in module.ports_by_direction(Direction.OUT)],
            )

        for order, (module, port) in enumerate(self._store.links()):
            g.add_edge(
                module.name,
                port.dest_module,
                key=port.name,
                src_port=port.name,
                dst_port=port.dest_port,
                port_type=port.type,
                order=order,
            )
        return g
