"""Read class and member summaries from the reflection metadata XML file.

The file nests ``ReflectionMetadataClass`` items under a category item below the
``<roblox>`` root. Each class carries ``<Properties>`` with ``Name`` and
``summary`` strings, and member summaries sit in ``ReflectionMetadataMember``
items one category level further down::

    <roblox>
      <Item class="ReflectionMetadataClasses">
        <Item class="ReflectionMetadataClass">
          <Properties>
            <string name="Name">Part</string>
            <string name="summary">A physical brick.</string>
          </Properties>
          <Item class="ReflectionMetadataProperties">
            <Item class="ReflectionMetadataMember">
              <Properties><string name="Name">Size</string>...</Properties>
            </Item>
          </Item>
        </Item>
      </Item>
    </roblox>

The element paths are plain data in :class:`MetadataQueries`, passed to the
parser explicitly so tests can exercise other layouts.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
import xml.etree.ElementTree as ET

from .dump import ContentSource

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .dump import Dump

logger = logging.getLogger(__name__)


class ReflectionMetadataError(ValueError):
    """Raised when the reflection metadata XML cannot be parsed."""


@dc.dataclass(frozen=True, slots=True)
class MetadataQueries:
    """ElementPath expressions locating classes, members, and their strings."""

    root_tag: str = "roblox"
    classes: str = "./Item/Item[@class='ReflectionMetadataClass']"
    members: str = "./Item/Item[@class='ReflectionMetadataMember']"
    name: str = "./Properties/string[@name='Name']"
    summary: str = "./Properties/string[@name='summary']"


DEFAULT_QUERIES = MetadataQueries()


@dc.dataclass(slots=True)
class MetadataMember:
    name: str
    summary: str = ""


@dc.dataclass(slots=True)
class MetadataClass:
    name: str
    summary: str = ""
    members: dict[str, MetadataMember] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class ReflectionMetadata:
    """Summaries keyed by class name."""

    classes: dict[str, MetadataClass] = dc.field(default_factory=dict)


def parse_reflection_metadata(
    text: str, *, queries: MetadataQueries = DEFAULT_QUERIES
) -> ReflectionMetadata:
    """Parse reflection metadata XML into class and member summaries.

    Parameters
    ----------
    text : str
        Full XML document.
    queries : MetadataQueries, optional
        Element paths to use; defaults to the stock file layout.

    Returns
    -------
    ReflectionMetadata
        Classes keyed by name. Classes without a ``Name`` string are skipped.

    Raises
    ------
    ReflectionMetadataError
        If the document is not well-formed XML or its root element is not
        ``queries.root_tag``.
    """
    try:
        root = ET.fromstring(text)  # noqa: S314 - local metadata shipped with the client
    except ET.ParseError as exc:
        msg = f"Invalid reflection metadata XML: {exc}"
        raise ReflectionMetadataError(msg) from exc
    if root.tag != queries.root_tag:
        msg = f"Expected <{queries.root_tag}> root element, found <{root.tag}>."
        raise ReflectionMetadataError(msg)

    metadata = ReflectionMetadata()
    for item in root.iterfind(queries.classes):
        name = _string_value(item, queries.name)
        if not name:
            continue
        meta_class = MetadataClass(name=name, summary=_string_value(item, queries.summary))
        for member_item in item.iterfind(queries.members):
            member_name = _string_value(member_item, queries.name)
            if member_name:
                meta_class.members[member_name] = MetadataMember(
                    name=member_name,
                    summary=_string_value(member_item, queries.summary),
                )
        metadata.classes[name] = meta_class
    return metadata


def read_reflection_metadata(
    path: Path, *, queries: MetadataQueries = DEFAULT_QUERIES
) -> ReflectionMetadata:
    """Read and parse the reflection metadata file at ``path``."""
    if not path.exists():
        msg = f"Reflection metadata '{path}' not found."
        raise FileNotFoundError(msg)
    return parse_reflection_metadata(path.read_text(encoding="utf-8"), queries=queries)


def apply_reflection_metadata(dump: Dump, metadata: ReflectionMetadata) -> int:
    """Copy non-empty summaries onto matching classes and members.

    Returns
    -------
    int
        Number of descriptions written.
    """
    applied = 0
    for dump_class in dump.classes:
        meta_class = metadata.classes.get(dump_class.name)
        if meta_class is None:
            continue
        if meta_class.summary:
            dump_class.set_description(meta_class.summary, ContentSource.REFLECTION_METADATA)
            applied += 1
        for member in dump_class.members:
            meta_member = meta_class.members.get(member.name)
            if meta_member is not None and meta_member.summary:
                member.set_description(meta_member.summary, ContentSource.REFLECTION_METADATA)
                applied += 1
    logger.debug("Applied %d reflection metadata summaries", applied)
    return applied


def _string_value(element: ET.Element, path: str) -> str:
    found = element.find(path)
    if found is None or found.text is None:
        return ""
    return found.text.strip()


__all__ = [
    "DEFAULT_QUERIES",
    "MetadataClass",
    "MetadataMember",
    "MetadataQueries",
    "ReflectionMetadata",
    "ReflectionMetadataError",
    "apply_reflection_metadata",
    "parse_reflection_metadata",
    "read_reflection_metadata",
]
