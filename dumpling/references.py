r"""Classify dotted-path references found in API documentation prose.

Documentation text names types and members with dotted paths such as
``Part``, ``Part.Size``, or ``Enum.Material.Plastic``. This module defines the
typed reference values those paths resolve to and :func:`parse_reference`,
which interprets a path against a :class:`~dumpling.index.SymbolIndex`.

The type variants double as the ``ValueType``/``Type``/``ReturnType`` payloads
of the JSON API dump (tagged by ``Category``), so a type decoded from the dump
can be handed straight to a link resolver.

Example
-------
>>> from dumpling.index import SymbolIndex
>>> from dumpling.references import parse_reference
>>> index = SymbolIndex.from_names({"Part": ["Size"]})
>>> parse_reference("Part.Size", index)
MemberReference(owner=ClassType(name='Part'), member='Size')
>>> parse_reference("Part.Missing", index) is None
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import msgspec

from ._constants import ENUM_PREFIX

if typ.TYPE_CHECKING:
    from .index import SymbolIndex


class TypeReference(msgspec.Struct, frozen=True, tag_field="Category", rename="pascal"):
    """A named type, tagged by the category it belongs to.

    Two references are equal only when both the variant and the name match.
    """

    name: str

    @property
    def kind(self) -> str:
        """Return the category tag (``"Class"``, ``"Enum"``, ...)."""
        return typ.cast("str", self.__struct_config__.tag)

    @property
    def qualified_name(self) -> str:
        """Return the name as it is written in documentation prose."""
        return self.name


class ClassType(TypeReference, tag="Class"):
    """A class tracked by the symbol index."""


class DataType(TypeReference, tag="DataType"):
    """An opaque value type (geometry, colour, signal...) not tracked by the index."""


class EnumType(TypeReference, tag="Enum"):
    """An enumeration, written ``Enum.<Name>`` in prose."""

    @property
    def qualified_name(self) -> str:
        return f"{ENUM_PREFIX}.{self.name}"


class GroupType(TypeReference, tag="Group"):
    """A structural group type such as ``Tuple`` or ``Dictionary``."""


class PrimitiveType(TypeReference, tag="Primitive"):
    """One of the fixed primitive types (``int``, ``string``, ...)."""


DumpType: typ.TypeAlias = ClassType | DataType | EnumType | GroupType | PrimitiveType


@dc.dataclass(frozen=True, slots=True)
class MemberReference:
    """The member named ``member`` belonging to the type ``owner``."""

    owner: TypeReference
    member: str


Reference: typ.TypeAlias = TypeReference | MemberReference


def parse_reference(reference: str, index: SymbolIndex) -> Reference | None:
    """Interpret a dotted path as a type or member reference.

    Rules are tried in a fixed order and the first match wins:

    1. ``Enum.X`` is the enum ``X`` and ``Enum.X.Y`` its item ``Y``. Enum names
       are not checked against anything; a bare ``Enum`` does not resolve.
    2. A primitive head is that primitive; trailing segments are ignored.
    3. A known class head is the class, or, with a second segment, the class
       member if and only if the index knows that member.
    4. Anything else is an unvalidated data type (or a member of one).

    Parameters
    ----------
    reference : str
        Dotted path as written in documentation, e.g. ``"Part.Size"``.
    index : SymbolIndex
        Index built from the final class list.

    Returns
    -------
    Reference | None
        A :class:`TypeReference` variant or a :class:`MemberReference`, or
        ``None`` when the path cannot be resolved. Segments past the third are
        never consulted.
    """
    head, *rest = reference.split(".")
    second = rest[0] if rest else None
    third = rest[1] if len(rest) > 1 else None

    if head == ENUM_PREFIX:
        # TODO: validate enum names once the index carries the dump's enums.
        if second is None:
            return None
        if third is None:
            return EnumType(second)
        return MemberReference(EnumType(second), third)

    if index.is_primitive(head):
        return PrimitiveType(head)

    if index.class_exists(head):
        if second is None:
            return ClassType(head)
        if index.member_exists(head, second):
            return MemberReference(ClassType(head), second)
        return None

    if second is None:
        return DataType(head)
    return MemberReference(DataType(head), second)


__all__ = [
    "ClassType",
    "DataType",
    "DumpType",
    "EnumType",
    "GroupType",
    "MemberReference",
    "PrimitiveType",
    "Reference",
    "TypeReference",
    "parse_reference",
]
