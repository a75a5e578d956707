"""Tests for XML persistence of the RecordStore."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from wirectl.domain.store import RecordStore
from wirectl.domain.types import MAX_FIELD_LENGTH, Direction
from wirectl.infrastructure.persistence import (
    StoreFormatError,
    load_store,
    save_store,
    store_from_xml,
    store_to_xml,
)


def _snapshot(store: RecordStore) -> list[tuple[str, list[tuple[str, str, str, str, str]]]]:
    return [
        (
            m.name,
            [(p.name, p.type, str(p.direction), p.dest_module, p.dest_port) for p in m],
        )
        for m in store
    ]


def _populated() -> RecordStore:
    store = RecordStore()
    a = store.find_or_create_module("A", create=True)
    b = store.find_or_create_module("B", create=True)
    out = store.find_or_create_port(a, "out1", create=True)
    inp = store.find_or_create_port(b, "in1", create=True)
    blank = store.find_or_create_port(b, "blank", create=True)
    assert out is not None and inp is not None and blank is not None
    out.type = "int"
    out.link_to("B", "in1")
    inp.type = "int"
    inp.mark_input()
    blank.type = ""
    return store


class TestRoundTrip:
    def test_round_trip_preserves_everything(self, tmp_path: Path) -> None:
        store = _populated()
        path = tmp_path / "links_data.xml"
        save_store(store, path)
        assert _snapshot(load_store(path)) == _snapshot(store)

    def test_empty_attributes_round_trip_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "links_data.xml"
        save_store(_populated(), path)
        loaded = load_store(path)
        port = loaded.find_or_create_port(loaded.find_or_create_module("B"), "blank")
        assert port is not None
        assert port.type == ""
        assert port.direction is Direction.NONE

    def test_empty_attributes_are_written(self) -> None:
        root = ET.fromstring(store_to_xml(_populated()))
        blank = root.find("./module[@name='B']/port[@name='blank']")
        assert blank is not None
        assert blank.attrib == {
            "name": "blank",
            "type": "",
            "dir": "none",
            "dest_mod": "",
            "dest_port": "",
        }

    def test_special_characters_survive(self) -> None:
        store = RecordStore()
        module = store.find_or_create_module('Q"<&>', create=True)
        port = store.find_or_create_port(module, "p'1", create=True)
        assert port is not None
        port.type = "map<str,int>"
        loaded = store_from_xml(store_to_xml(store))
        assert _snapshot(loaded) == _snapshot(store)

    def test_empty_store(self) -> None:
        assert len(store_from_xml(store_to_xml(RecordStore()))) == 0


class TestLoad:
    def test_missing_file_is_empty_store(self, tmp_path: Path) -> None:
        store = load_store(tmp_path / "nope.xml")
        assert len(store) == 0

    def test_malformed_xml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "links_data.xml"
        path.write_text("<root><module name='A'>", encoding="utf-8")
        with pytest.raises(StoreFormatError):
            load_store(path)

    def test_document_order(self) -> None:
        xml = (
            "<root>"
            '<module name="Z"><port name="b" /><port name="a" /></module>'
            '<module name="A" />'
            "</root>"
        )
        store = store_from_xml(xml)
        assert [m.name for m in store] == ["Z", "A"]
        module = store.find_or_create_module("Z")
        assert module is not None
        assert [p.name for p in module] == ["b", "a"]

    def test_missing_attributes_read_as_empty(self) -> None:
        store = store_from_xml('<root><module name="A"><port name="p" /></module></root>')
        port = store.find_or_create_port(store.find_or_create_module("A"), "p")
        assert port is not None
        assert port.type == ""
        assert port.direction is Direction.NONE
        assert port.dest_module == ""

    def test_unnamed_elements_are_skipped(self) -> None:
        xml = '<root><module><port name="p" /></module><module name="B"><port /></module></root>'
        store = store_from_xml(xml)
        assert [m.name for m in store] == ["B"]
        module = store.find_or_create_module("B")
        assert module is not None
        assert len(module) == 0

    def test_duplicate_module_elements_merge(self) -> None:
        xml = (
            "<root>"
            '<module name="A"><port name="p1" type="int" /></module>'
            '<module name="A"><port name="p2" type="str" /></module>'
            "</root>"
        )
        store = store_from_xml(xml)
        assert len(store) == 1
        module = store.find_or_create_module("A")
        assert module is not None
        assert [p.name for p in module] == ["p1", "p2"]

    def test_long_values_are_truncated(self) -> None:
        long = "m" * 100
        store = store_from_xml(f'<root><module name="{long}" /></root>')
        assert [m.name for m in store] == [long[:MAX_FIELD_LENGTH]]


class TestSave:
    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "dir" / "links_data.xml"
        save_store(_populated(), path)
        assert path.is_file()

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "links_data.xml"
        save_store(_populated(), path)
        save_store(RecordStore(), path)
        assert len(load_store(path)) == 0
