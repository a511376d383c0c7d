"""Unit tests for description heuristics."""

from __future__ import annotations

import typing as typ

from dumpling.dump import ContentSource, decode_dump
from dumpling.heuristics import mark_camelcase_members_deprecated

if typ.TYPE_CHECKING:
    from dumpling.dump import Dump


def test_camelcase_twins_are_marked(sample_dump: Dump) -> None:
    marked = mark_camelcase_members_deprecated(sample_dump)

    part = sample_dump.find_class("Part")
    instance = sample_dump.find_class("Instance")
    assert part is not None
    assert instance is not None
    break_joints = part.find_member("breakJoints")
    clone = instance.find_member("clone")
    assert break_joints is not None
    assert clone is not None

    assert marked == 2
    assert break_joints.description == (
        "`breakJoints` is deprecated. Use `BreakJoints` instead."
    )
    assert break_joints.description_source is ContentSource.HEURISTIC
    assert clone.description_source is ContentSource.HEURISTIC


def test_members_without_twin_are_untouched() -> None:
    dump = decode_dump(
        b'{"Classes": [{"Name": "Model", "Members": [{"MemberType": "Event",'
        b' "Name": "changed"}, {"MemberType": "Event", "Name": "Changed2"}]}]}'
    )
    assert mark_camelcase_members_deprecated(dump) == 0
    assert dump.classes[0].members[0].description is None


def test_pascalcase_members_are_never_marked(sample_dump: Dump) -> None:
    mark_camelcase_members_deprecated(sample_dump)
    part = sample_dump.find_class("Part")
    assert part is not None
    member = part.find_member("BreakJoints")
    assert member is not None
    assert member.description is None
