"""Read-only symbol table over the merged class list.

The index is built once, after every description source has been merged, and
answers existence questions for classes, their members, and the fixed set of
primitive type names. Link resolvers hold one for the whole rendering pass.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import types
import typing as typ

from ._constants import PRIMITIVE_TYPES

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .dump import Dump, DumpClass

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class IndexedClass:
    """Position of a class in the dump and of each of its members.

    Attributes
    ----------
    position : int
        Ordinal of the class within the class list.
    members : Mapping[str, int]
        Member name to ordinal within the class's member list.
    """

    position: int
    members: cabc.Mapping[str, int]


class SymbolIndex:
    """Immutable lookup of class names, member names, and primitive types."""

    __slots__ = ("_classes", "_primitives")

    def __init__(
        self,
        classes: cabc.Mapping[str, IndexedClass],
        primitives: cabc.Iterable[str] = PRIMITIVE_TYPES,
    ) -> None:
        self._classes = types.MappingProxyType(dict(classes))
        self._primitives = frozenset(primitives)

    @classmethod
    def from_names(
        cls, classes: cabc.Mapping[str, cabc.Iterable[str]]
    ) -> SymbolIndex:
        """Build an index from ``class name -> member names`` in iteration order."""
        entries: dict[str, IndexedClass] = {}
        for position, (name, members) in enumerate(classes.items()):
            entries[name] = _index_class(position, members)
        return cls(entries)

    @classmethod
    def from_classes(cls, classes: cabc.Iterable[DumpClass]) -> SymbolIndex:
        """Build an index from dump classes, keeping their order.

        A class name seen twice keeps the later class; the duplicate is logged
        because callers should not depend on which definition wins.
        """
        entries: dict[str, IndexedClass] = {}
        for position, dump_class in enumerate(classes):
            if dump_class.name in entries:
                logger.warning(
                    "Duplicate class %r in API dump; the later definition "
                    "replaces the earlier one in the symbol index",
                    dump_class.name,
                )
            entries[dump_class.name] = _index_class(
                position, (member.name for member in dump_class.members)
            )
        return cls(entries)

    @classmethod
    def from_dump(cls, dump: Dump) -> SymbolIndex:
        """Build an index over every class in ``dump``."""
        return cls.from_classes(dump.classes)

    @property
    def classes(self) -> cabc.Mapping[str, IndexedClass]:
        """Return the read-only class table."""
        return self._classes

    def class_exists(self, name: str) -> bool:
        return name in self._classes

    def member_exists(self, class_name: str, member_name: str) -> bool:
        entry = self._classes.get(class_name)
        return entry is not None and member_name in entry.members

    def is_primitive(self, name: str) -> bool:
        return name in self._primitives

    def __len__(self) -> int:
        return len(self._classes)

    def __repr__(self) -> str:
        return f"SymbolIndex(classes={len(self._classes)})"


def _index_class(position: int, member_names: cabc.Iterable[str]) -> IndexedClass:
    """Record member positions for one class; a repeated name keeps its last position."""
    members = {name: ordinal for ordinal, name in enumerate(member_names)}
    return IndexedClass(position=position, members=types.MappingProxyType(members))


__all__ = ["IndexedClass", "SymbolIndex"]
