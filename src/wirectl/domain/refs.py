"""Reference tokens — ``Module::Port:Type`` on the command line.

Pure functions, no store access. Consumed by the link service for both
``add`` and ``remove``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from wirectl.domain.types import truncate

MODULE_SEPARATOR = "::"
TYPE_SEPARATOR = ":"

# Characters XML 1.0 cannot carry in an attribute value.
_XML_ILLEGAL = re.compile("[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


class RefParseError(ValueError):
    """Raised when a token yields no module name."""


@dataclass(frozen=True)
class PortRef:
    """A parsed reference token. Port and type are empty when not given."""

    module: str
    port: str = ""
    type: str = ""

    def __str__(self) -> str:
        text = self.module
        if self.port:
            text += f"{MODULE_SEPARATOR}{self.port}"
        if self.type:
            text += f"{TYPE_SEPARATOR}{self.type}"
        return text


def parse_ref(token: str) -> PortRef:
    """Split *token* into module, port and type.

    - No ``::`` — the whole token is the module name.
    - Otherwise the first ``::`` separates module from the remainder,
      and the first ``:`` in the remainder separates port from type.

    Each field is truncated to the maximum field length. Missing port or
    type come back empty; defaulting is left to the caller.

    Examples:
        >>> parse_ref("Mod::Port:Type")
        PortRef(module='Mod', port='Port', type='Type')
        >>> parse_ref("Mod")
        PortRef(module='Mod', port='', type='')

    Raises:
        RefParseError: if the module name is empty, or any field holds a
            character the diagram file cannot store.
    """
    module, sep, rest = token.partition(MODULE_SEPARATOR)
    port = port_type = ""
    if sep:
        port, _, port_type = rest.partition(TYPE_SEPARATOR)

    module = truncate(module)
    if not module:
        msg = f"No module name in reference {token!r}"
        raise RefParseError(msg)
    bad = _XML_ILLEGAL.search(token)
    if bad:
        msg = f"Unsupported character {bad.group()!r} in reference {token!r}"
        raise RefParseError(msg)
    return PortRef(module=module, port=truncate(port), type=truncate(port_type))
