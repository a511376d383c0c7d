r"""Parse supplemental prose and attach it to the API dump.

Supplemental files are a series of item descriptions. Each description is a
block of fenced TOML naming its target, followed by free Markdown prose::

    +++
    target = "Instance"
    +++

    The base class for all instances.

    +++
    target = "Instance.Name"
    +++

    A handy name to refer to the `Instance` with.

Targets are ``Class`` or ``Class.Member``. Prose can reference other API items
with Markdown reference links such as ``[Instance.Parent]``; those are resolved
when the HTML is rendered.

Example
-------
>>> from dumpling.supplement import parse_supplement
>>> items = parse_supplement('+++\ntarget = "Part"\n+++\nA brick.')
>>> items["Part"].prose
'A brick.'
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import tomllib
import typing as typ

from ._constants import METADATA_FENCE
from .dump import ContentSource

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .dump import Dump

logger = logging.getLogger(__name__)

FENCE_PATTERN = re.compile(re.escape(METADATA_FENCE))


class SupplementError(ValueError):
    """Raised when supplemental content is malformed."""


@dc.dataclass(slots=True)
class ItemDescription:
    """Prose written for one class or member.

    Attributes
    ----------
    target : str
        ``Class`` or ``Class.Member`` the prose describes.
    prose : str
        Markdown body with surrounding whitespace removed.
    metadata : dict[str, Any]
        Every key from the TOML block, ``target`` included.
    """

    target: str
    prose: str
    metadata: dict[str, typ.Any] = dc.field(default_factory=dict)


def parse_supplement(source: str) -> dict[str, ItemDescription]:
    """Split fenced supplemental content into descriptions keyed by target.

    Parameters
    ----------
    source : str
        Document text; anything before the first fence is ignored.

    Returns
    -------
    dict[str, ItemDescription]
        Descriptions keyed by target. A target described twice keeps its last
        description.

    Raises
    ------
    SupplementError
        If a metadata block is never closed, is not valid TOML, or has no
        string ``target``.
    """
    fences = [match.start() for match in FENCE_PATTERN.finditer(source)]
    fence_len = len(METADATA_FENCE)
    result: dict[str, ItemDescription] = {}
    for pair in range(0, len(fences), 2):
        if pair + 1 >= len(fences):
            msg = f"Unclosed metadata block starting at offset {fences[pair]}."
            raise SupplementError(msg)
        start, end = fences[pair], fences[pair + 1]
        metadata = _parse_metadata(source[start + fence_len : end].strip())
        prose_end = fences[pair + 2] if pair + 2 < len(fences) else len(source)
        prose = source[end + fence_len : prose_end].strip()
        target = metadata["target"]
        result[target] = ItemDescription(target=target, prose=prose, metadata=metadata)
    return result


def _parse_metadata(text: str) -> dict[str, typ.Any]:
    try:
        metadata = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in metadata block: {exc}"
        raise SupplementError(msg) from exc
    target = metadata.get("target")
    if not isinstance(target, str) or not target.strip():
        msg = "Metadata block is missing a 'target' string."
        raise SupplementError(msg)
    metadata["target"] = target.strip()
    return metadata


def read_supplemental_content(path: Path) -> dict[str, ItemDescription]:
    """Read one supplemental file, or every ``*.md`` file below a directory.

    Files are read in sorted path order, so a target described in several
    files keeps the description from the last one.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    SupplementError
        If any file is malformed; the message names the file.
    """
    if not path.exists():
        msg = f"Supplemental content '{path}' not found."
        raise FileNotFoundError(msg)
    files = sorted(path.rglob("*.md")) if path.is_dir() else [path]
    items: dict[str, ItemDescription] = {}
    for file_path in files:
        try:
            items.update(parse_supplement(file_path.read_text(encoding="utf-8")))
        except SupplementError as exc:
            msg = f"{file_path}: {exc}"
            raise SupplementError(msg) from exc
    logger.debug("Read %d supplemental descriptions from %s", len(items), path)
    return items


def apply_supplemental_content(
    dump: Dump, items: cabc.Mapping[str, ItemDescription]
) -> list[str]:
    """Attach supplemental prose to the classes and members it targets.

    Returns
    -------
    list[str]
        Targets that matched no class or member, in input order.
    """
    unmatched: list[str] = []
    for target, item in items.items():
        class_name, _, member_name = target.partition(".")
        dump_class = dump.find_class(class_name)
        if dump_class is None:
            unmatched.append(target)
            continue
        if not member_name:
            dump_class.set_description(item.prose, ContentSource.COMMUNITY)
            continue
        member = dump_class.find_member(member_name)
        if member is None:
            unmatched.append(target)
            continue
        member.set_description(item.prose, ContentSource.COMMUNITY)
    return unmatched


__all__ = [
    "ItemDescription",
    "SupplementError",
    "apply_supplemental_content",
    "parse_supplement",
    "read_supplemental_content",
]
