"""Shared fixtures describing a small but representative API dump."""

from __future__ import annotations

import json
import typing as typ

import pytest

from dumpling.dump import decode_dump
from dumpling.index import SymbolIndex

if typ.TYPE_CHECKING:
    from pathlib import Path

    from dumpling.dump import Dump

SAMPLE_DUMP: dict[str, typ.Any] = {
    "Version": 1,
    "Classes": [
        {
            "Name": "Instance",
            "Superclass": "<<<ROOT>>>",
            "Tags": ["NotCreatable"],
            "MemoryCategory": "Instances",
            "Members": [
                {
                    "MemberType": "Property",
                    "Name": "Name",
                    "ValueType": {"Category": "Primitive", "Name": "string"},
                    "Security": {"Read": "None", "Write": "None"},
                    "Tags": [],
                },
                {
                    "MemberType": "Property",
                    "Name": "Parent",
                    "ValueType": {"Category": "Class", "Name": "Instance"},
                    "Tags": ["NotReplicated"],
                },
                {
                    "MemberType": "Function",
                    "Name": "FindFirstChild",
                    "Parameters": [
                        {
                            "Name": "name",
                            "Type": {"Category": "Primitive", "Name": "string"},
                        },
                        {
                            "Name": "recursive",
                            "Type": {"Category": "Primitive", "Name": "bool"},
                            "Default": "false",
                        },
                    ],
                    "ReturnType": {"Category": "Class", "Name": "Instance"},
                    "Tags": [],
                },
                {
                    "MemberType": "Function",
                    "Name": "clone",
                    "Parameters": [],
                    "ReturnType": {"Category": "Class", "Name": "Instance"},
                    "Tags": ["Deprecated"],
                },
                {
                    "MemberType": "Function",
                    "Name": "Clone",
                    "Parameters": [],
                    "ReturnType": {"Category": "Class", "Name": "Instance"},
                    "Tags": [],
                },
                {
                    "MemberType": "Event",
                    "Name": "ChildAdded",
                    "Parameters": [
                        {
                            "Name": "child",
                            "Type": {"Category": "Class", "Name": "Instance"},
                        }
                    ],
                    "Tags": [],
                },
            ],
        },
        {
            "Name": "Part",
            "Superclass": "Instance",
            "Tags": [],
            "Members": [
                {
                    "MemberType": "Property",
                    "Name": "Size",
                    "ValueType": {"Category": "DataType", "Name": "Vector3"},
                    "Tags": [],
                },
                {
                    "MemberType": "Property",
                    "Name": "Material",
                    "ValueType": {"Category": "Enum", "Name": "Material"},
                    "Tags": [],
                },
                {
                    "MemberType": "Function",
                    "Name": "breakJoints",
                    "Parameters": [],
                    "ReturnType": {"Category": "Primitive", "Name": "void"},
                    "Tags": ["Deprecated"],
                },
                {
                    "MemberType": "Function",
                    "Name": "BreakJoints",
                    "Parameters": [],
                    "ReturnType": {"Category": "Primitive", "Name": "void"},
                    "Tags": [],
                },
            ],
        },
        {
            "Name": "BindableFunction",
            "Superclass": "Instance",
            "Tags": [],
            "Members": [
                {
                    "MemberType": "Callback",
                    "Name": "OnInvoke",
                    "Parameters": [
                        {
                            "Name": "arguments",
                            "Type": {"Category": "Group", "Name": "Tuple"},
                        }
                    ],
                    "ReturnType": {"Category": "Group", "Name": "Tuple"},
                    "Tags": [],
                }
            ],
        },
        {
            "Name": "Hopper",
            "Superclass": "Instance",
            "Tags": ["Deprecated", {"PreferredDescriptorName": "Backpack"}],
            "Members": [],
        },
    ],
    "Enums": [
        {
            "Name": "Material",
            "Items": [
                {"Name": "Plastic", "Value": 256},
                {"Name": "Wood", "Value": 512},
            ],
        }
    ],
}


@pytest.fixture
def sample_dump_json() -> str:
    """Return the sample dump serialised as JSON text."""
    return json.dumps(SAMPLE_DUMP)


@pytest.fixture
def sample_dump(sample_dump_json: str) -> Dump:
    """Return a freshly decoded sample dump; tests may mutate it."""
    return decode_dump(sample_dump_json)


@pytest.fixture
def sample_dump_path(tmp_path: Path, sample_dump_json: str) -> Path:
    """Write the sample dump to disk and return its path."""
    path = tmp_path / "API-Dump.json"
    path.write_text(sample_dump_json, encoding="utf-8")
    return path


@pytest.fixture
def part_index() -> SymbolIndex:
    """Return the index used by the link resolution examples."""
    return SymbolIndex.from_names({"Part": ["Size", "Anchored"], "Model": []})
