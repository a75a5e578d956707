"""LinkService — create and sever links between ports.

Links are directional and live only on the source port. ``add`` is
last-write-wins: reusing a port as a destination turns it into an IN
port and drops whatever link it was the source of. ``remove`` only
resets the source port; the destination keeps ``direction=in``.
"""

from __future__ import annotations

import logging

from wirectl.domain.refs import PortRef, RefParseError, parse_ref
from wirectl.domain.types import UNKNOWN_TYPE
from wirectl.services.base import BaseService
from wirectl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class LinkService(BaseService):
    """Add and remove links in the workspace store."""

    def add(self, source: str, destination: str) -> ServiceResult:
        """Link ``source`` (an OUT port) to ``destination`` (an IN port).

        Defaults, in order:

        - a source without a type gets ``unknown``;
        - a destination without a port reuses the source port name
          (reported as a warning);
        - a destination without a type reuses the resolved source type.

        Modules and ports are created as needed and both port types are
        overwritten with the resolved ones. Calling twice with the same
        arguments leaves the store as a single call would.
        """
        op = "link_add"
        try:
            src = parse_ref(source)
        except RefParseError as exc:
            return ServiceResult.failure(
                op, "PARSE_ERROR", f"Invalid source format: {exc}", ref=source
            )
        try:
            dst = parse_ref(destination)
        except RefParseError as exc:
            return ServiceResult.failure(
                op, "PARSE_ERROR", f"Invalid destination format: {exc}", ref=destination
            )

        if not src.port:
            return ServiceResult.failure(
                op,
                "MISSING_PORT",
                "Source must specify a port (e.g. Module::Port)",
                ref=source,
            )

        warnings: list[str] = []
        src_type = src.type or UNKNOWN_TYPE
        dst_port = dst.port
        if not dst_port:
            dst_port = src.port
            warnings.append(f"Destination port not specified, using '{dst_port}'")
        dst_type = dst.type or src_type

        store = self._store
        src_module = store.find_or_create_module(src.module, create=True)
        out_port = store.find_or_create_port(src_module, src.port, create=True)
        dst_module = store.find_or_create_module(dst.module, create=True)
        in_port = store.find_or_create_port(dst_module, dst_port, create=True)
        assert out_port is not None and in_port is not None

        out_port.type = src_type
        in_port.type = dst_type
        out_port.link_to(dst.module, dst_port)
        # Applied after link_to so a self-link (same port on both ends) ends up IN.
        in_port.mark_input()
        self._workspace.graph.invalidate()

        resolved_src = PortRef(src.module, src.port, src_type)
        resolved_dst = PortRef(dst.module, dst_port, dst_type)
        logger.debug("Linked %s -> %s", resolved_src, resolved_dst)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "source": str(resolved_src),
                "destination": str(resolved_dst),
                "source_module": src.module,
                "source_port": src.port,
                "source_type": src_type,
                "dest_module": dst.module,
                "dest_port": dst_port,
                "dest_type": dst_type,
            },
            warnings=warnings,
        )

    def remove(self, source: str, destination: str) -> ServiceResult:
        """Sever the link from ``source`` to ``destination``.

        Type components in either reference are ignored. Succeeds only
        when the source port currently points at exactly the destination
        module and port; otherwise nothing changes.
        """
        op = "link_remove"
        try:
            src = parse_ref(source)
            dst = parse_ref(destination)
        except RefParseError as exc:
            return ServiceResult.failure(op, "PARSE_ERROR", str(exc))

        store = self._store
        module = store.find_or_create_module(src.module)
        if module is None:
            return ServiceResult.failure(
                op, "NOT_FOUND", f"Module not found: {src.module}", module=src.module
            )
        port = store.find_or_create_port(module, src.port)
        if port is None:
            return ServiceResult.failure(
                op,
                "NOT_FOUND",
                f"Port not found: {src.module}::{src.port}",
                module=src.module,
                port=src.port,
            )

        link_text = f"{src.module}::{src.port} -> {dst.module}::{dst.port}"
        if (port.dest_module, port.dest_port) != (dst.module, dst.port):
            return ServiceResult.failure(
                op,
                "LINK_NOT_FOUND",
                f"Link not found: {link_text}",
                current=f"{port.dest_module}::{port.dest_port}" if port.dest_module else None,
            )

        port.unlink()
        self._workspace.graph.invalidate()
        logger.debug("Removed link %s", link_text)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "source": f"{src.module}::{src.port}",
                "destination": f"{dst.module}::{dst.port}",
            },
        )
