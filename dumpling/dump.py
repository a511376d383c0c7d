"""Typed model of the JSON API dump and the descriptions merged onto it.

The dump lists every class with its superclass, tags, and members. Members are
a tagged union on ``MemberType`` and types are a tagged union on ``Category``;
both are decoded with :mod:`msgspec`. Dumpling adds ``Description`` and
``DescriptionSource`` fields as descriptions are merged, and the same structs
are encoded back out for the megadump.

Example
-------
>>> from dumpling.dump import decode_dump
>>> dump = decode_dump(b'{"Classes": [{"Name": "Part", "Members": []}]}')
>>> dump.classes[0].name
'Part'
"""

from __future__ import annotations

import enum
import typing as typ

import msgspec

from .references import DumpType  # noqa: TC001 - msgspec resolves annotations at runtime

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


class DumpLoadError(ValueError):
    """Raised when an API dump cannot be read or does not match the model."""


class ContentSource(enum.StrEnum):
    """Where a description came from; later sources override earlier ones."""

    API_DUMP = "ApiDump"
    REFLECTION_METADATA = "ReflectionMetadata"
    HEURISTIC = "Heuristic"
    COMMUNITY = "Community"


# Newer dumps mix plain tags with descriptor objects such as
# {"PreferredDescriptorName": "Name"}.
Tag: typ.TypeAlias = str | dict[str, typ.Any]


def tag_names(tags: cabc.Iterable[Tag]) -> list[str]:
    """Return the plain string tags, dropping descriptor objects."""
    return [tag for tag in tags if isinstance(tag, str)]


class DumpParameter(msgspec.Struct, kw_only=True, rename="pascal"):
    """One parameter of a function, event, or callback."""

    name: str
    kind: DumpType = msgspec.field(name="Type")
    default: str | None = None
    description: str | None = None


class DumpReturn(msgspec.Struct, kw_only=True, rename="pascal"):
    """One documented return value."""

    kind: DumpType = msgspec.field(name="Type")
    description: str | None = None


class DumpMember(msgspec.Struct, kw_only=True, tag_field="MemberType", rename="pascal"):
    """Fields shared by every member kind."""

    name: str
    tags: list[Tag] = msgspec.field(default_factory=list)
    description: str | None = None
    description_source: ContentSource | None = None

    def set_description(self, text: str, source: ContentSource) -> None:
        self.description = text
        self.description_source = source


class DumpProperty(DumpMember, tag="Property", kw_only=True):
    value_type: DumpType


class DumpFunction(DumpMember, tag="Function", kw_only=True):
    parameters: list[DumpParameter] = msgspec.field(default_factory=list)
    return_type: DumpType
    returns: list[DumpReturn] = msgspec.field(default_factory=list)


class DumpEvent(DumpMember, tag="Event", kw_only=True):
    parameters: list[DumpParameter] = msgspec.field(default_factory=list)


class DumpCallback(DumpMember, tag="Callback", kw_only=True):
    parameters: list[DumpParameter] = msgspec.field(default_factory=list)
    return_type: DumpType
    returns: list[DumpReturn] = msgspec.field(default_factory=list)


DumpClassMember: typ.TypeAlias = DumpProperty | DumpFunction | DumpEvent | DumpCallback

_Member = typ.TypeVar("_Member", bound=DumpMember)


class DumpClass(msgspec.Struct, kw_only=True, rename="pascal"):
    """A class and its ordered member list."""

    name: str
    superclass: str | None = None
    tags: list[Tag] = msgspec.field(default_factory=list)
    members: list[DumpClassMember] = msgspec.field(default_factory=list)
    description: str | None = None
    description_source: ContentSource | None = None

    def set_description(self, text: str, source: ContentSource) -> None:
        self.description = text
        self.description_source = source

    def find_member(self, name: str) -> DumpClassMember | None:
        """Return the last member named ``name``, matching the symbol index."""
        found = None
        for member in self.members:
            if member.name == name:
                found = member
        return found

    def properties(self) -> list[DumpProperty]:
        return self._of_kind(DumpProperty)

    def functions(self) -> list[DumpFunction]:
        return self._of_kind(DumpFunction)

    def events(self) -> list[DumpEvent]:
        return self._of_kind(DumpEvent)

    def callbacks(self) -> list[DumpCallback]:
        return self._of_kind(DumpCallback)

    def _of_kind(self, kind: type[_Member]) -> list[_Member]:
        return [member for member in self.members if isinstance(member, kind)]


class DumpEnumItem(msgspec.Struct, kw_only=True, rename="pascal"):
    name: str
    value: int


class DumpEnum(msgspec.Struct, kw_only=True, rename="pascal"):
    name: str
    items: list[DumpEnumItem] = msgspec.field(default_factory=list)


class Dump(msgspec.Struct, kw_only=True, rename="pascal"):
    """The whole API surface: classes in dump order, then enums."""

    classes: list[DumpClass] = msgspec.field(default_factory=list)
    enums: list[DumpEnum] = msgspec.field(default_factory=list)

    def find_class(self, name: str) -> DumpClass | None:
        """Return the last class named ``name``, matching the symbol index."""
        found = None
        for dump_class in self.classes:
            if dump_class.name == name:
                found = dump_class
        return found


def decode_dump(data: bytes | str) -> Dump:
    """Decode a JSON API dump.

    Raises
    ------
    DumpLoadError
        If ``data`` is not JSON or does not match the dump model.
    """
    try:
        return msgspec.json.decode(data, type=Dump)
    except msgspec.DecodeError as exc:
        msg = f"Invalid API dump: {exc}"
        raise DumpLoadError(msg) from exc


def read_dump(path: Path) -> Dump:
    """Read and decode the JSON API dump at ``path``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    DumpLoadError
        If the file contents are not a valid dump.
    """
    if not path.exists():
        msg = f"API dump '{path}' not found."
        raise FileNotFoundError(msg)
    try:
        return decode_dump(path.read_bytes())
    except DumpLoadError as exc:
        msg = f"Could not load API dump '{path}': {exc}"
        raise DumpLoadError(msg) from exc


def encode_dump(dump: Dump) -> bytes:
    """Encode ``dump``, merged descriptions included, as JSON."""
    return msgspec.json.encode(dump)


__all__ = [
    "ContentSource",
    "Dump",
    "DumpCallback",
    "DumpClass",
    "DumpClassMember",
    "DumpEnum",
    "DumpEnumItem",
    "DumpEvent",
    "DumpFunction",
    "DumpLoadError",
    "DumpMember",
    "DumpParameter",
    "DumpProperty",
    "DumpReturn",
    "Tag",
    "decode_dump",
    "encode_dump",
    "read_dump",
    "tag_names",
]
