"""XML persistence for the RecordStore.

On-disk layout::

    <root>
      <module name="A">
        <port name="p1" type="int" dir="out" dest_mod="B" dest_port="p1" />
      </module>
    </root>

Every port attribute is always written, empty strings included, so an
empty value round-trips as empty rather than missing. Loading rebuilds
modules and ports via find-or-create in document order.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from wirectl.domain.store import RecordStore
from wirectl.domain.types import Direction, truncate

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

ROOT_TAG = "root"
MODULE_TAG = "module"
PORT_TAG = "port"


class StoreFormatError(Exception):
    """The backing file exists but is not a readable diagram."""


def store_to_xml(store: RecordStore) -> str:
    """Serialize *store* to an indented XML document."""
    root = ET.Element(ROOT_TAG)
    for module in store:
        mod_el = ET.SubElement(root, MODULE_TAG, {"name": module.name})
        for port in module:
            ET.SubElement(
                mod_el,
                PORT_TAG,
                {
                    "name": port.name,
                    "type": port.type,
                    "dir": str(port.direction),
                    "dest_mod": port.dest_module,
                    "dest_port": port.dest_port,
                },
            )
    ET.indent(root, space="  ")
    return ET.tostring(root, encoding="unicode") + "\n"


def store_from_xml(text: str) -> RecordStore:
    """Rebuild a store from an XML document.

    Elements without a name are skipped. Missing attributes read as empty.

    Raises:
        StoreFormatError: if *text* is not well-formed XML.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        msg = f"Malformed diagram XML: {exc}"
        raise StoreFormatError(msg) from exc

    store = RecordStore()
    for mod_el in root.iter(MODULE_TAG):
        module = store.find_or_create_module(truncate(mod_el.get("name", "")), create=True)
        if module is None:
            logger.warning("Skipping unnamed module element")
            continue
        for port_el in mod_el.findall(PORT_TAG):
            port = module.find_or_create_port(truncate(port_el.get("name", "")), create=True)
            if port is None:
                logger.warning("Skipping unnamed port in module %s", module.name)
                continue
            port.type = truncate(port_el.get("type", ""))
            port.direction = Direction.parse(port_el.get("dir"))
            port.dest_module = truncate(port_el.get("dest_mod", ""))
            port.dest_port = truncate(port_el.get("dest_port", ""))
    return store


def load_store(path: Path) -> RecordStore:
    """Read the store from *path*; a missing file yields an empty store."""
    if not path.is_file():
        logger.debug("No diagram file at %s, starting empty", path)
        return RecordStore()
    store = store_from_xml(path.read_text(encoding="utf-8"))
    logger.debug("Loaded %d modules from %s", len(store), path)
    return store


def save_store(store: RecordStore, path: Path) -> None:
    """Overwrite *path* with the serialized store, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(store_to_xml(store), encoding="utf-8")
    logger.debug("Saved %d modules to %s", len(store), path)
