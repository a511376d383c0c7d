"""Unit tests for decoding and encoding the JSON API dump."""

from __future__ import annotations

import typing as typ

import msgspec
import pytest

from dumpling.dump import (
    ContentSource,
    DumpCallback,
    DumpEvent,
    DumpFunction,
    DumpLoadError,
    DumpProperty,
    decode_dump,
    encode_dump,
    read_dump,
    tag_names,
)
from dumpling.references import ClassType, DataType, EnumType, GroupType, PrimitiveType

if typ.TYPE_CHECKING:
    from pathlib import Path

    from dumpling.dump import Dump


def test_members_decode_to_their_kind(sample_dump: Dump) -> None:
    instance = sample_dump.find_class("Instance")
    assert instance is not None

    kinds = [type(member) for member in instance.members]
    assert kinds == [
        DumpProperty,
        DumpProperty,
        DumpFunction,
        DumpFunction,
        DumpFunction,
        DumpEvent,
    ]
    assert [m.name for m in instance.events()] == ["ChildAdded"]
    assert len(instance.functions()) == 3


def test_types_decode_to_reference_variants(sample_dump: Dump) -> None:
    part = sample_dump.find_class("Part")
    bindable = sample_dump.find_class("BindableFunction")
    instance = sample_dump.find_class("Instance")
    assert part is not None
    assert bindable is not None
    assert instance is not None

    size, material = part.properties()
    assert size.value_type == DataType("Vector3")
    assert material.value_type == EnumType("Material")

    find_first_child = instance.find_member("FindFirstChild")
    assert isinstance(find_first_child, DumpFunction)
    assert find_first_child.return_type == ClassType("Instance")
    assert [p.kind for p in find_first_child.parameters] == [
        PrimitiveType("string"),
        PrimitiveType("bool"),
    ]
    assert find_first_child.parameters[1].default == "false"

    (on_invoke,) = bindable.callbacks()
    assert isinstance(on_invoke, DumpCallback)
    assert on_invoke.return_type == GroupType("Tuple")


def test_unknown_fields_are_ignored(sample_dump: Dump) -> None:
    """Security, memory category and version fields are not modelled."""
    assert sample_dump.classes[0].superclass == "<<<ROOT>>>"
    assert sample_dump.enums[0].items[1].value == 512


def test_tag_names_skip_descriptor_objects(sample_dump: Dump) -> None:
    hopper = sample_dump.find_class("Hopper")
    assert hopper is not None
    assert tag_names(hopper.tags) == ["Deprecated"]


def test_set_description_records_source(sample_dump: Dump) -> None:
    part = sample_dump.find_class("Part")
    assert part is not None
    part.set_description("A brick.", ContentSource.COMMUNITY)

    assert part.description == "A brick."
    assert part.description_source is ContentSource.COMMUNITY


def test_find_class_returns_last_duplicate() -> None:
    dump = decode_dump(
        b'{"Classes": [{"Name": "Part", "Tags": ["A"]}, {"Name": "Part", "Tags": ["B"]}]}'
    )
    found = dump.find_class("Part")
    assert found is not None
    assert found.tags == ["B"]


@pytest.mark.parametrize(
    "payload",
    [
        b"not json",
        b'{"Classes": [{"Members": []}]}',
        b'{"Classes": [{"Name": "Part", "Members": [{"MemberType": "Field", "Name": "X"}]}]}',
    ],
)
def test_invalid_dumps_raise(payload: bytes) -> None:
    with pytest.raises(DumpLoadError, match="Invalid API dump"):
        decode_dump(payload)


def test_read_dump_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        read_dump(tmp_path / "missing.json")


def test_read_dump_names_the_file(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(DumpLoadError, match="broken.json"):
        read_dump(path)


def test_encode_includes_merged_descriptions(sample_dump: Dump) -> None:
    part = sample_dump.find_class("Part")
    assert part is not None
    part.set_description("A brick.", ContentSource.COMMUNITY)

    encoded = msgspec.json.decode(encode_dump(sample_dump))
    encoded_part = encoded["Classes"][1]

    assert encoded_part["Description"] == "A brick."
    assert encoded_part["DescriptionSource"] == "Community"
    assert encoded_part["Members"][0]["MemberType"] == "Property"
    assert encoded_part["Members"][0]["ValueType"] == {
        "Category": "DataType",
        "Name": "Vector3",
    }
    assert decode_dump(encode_dump(sample_dump)) == sample_dump
