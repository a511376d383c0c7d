"""Heuristics that fill in descriptions the dump itself does not carry."""

from __future__ import annotations

import logging
import typing as typ

from .dump import ContentSource

if typ.TYPE_CHECKING:
    from .dump import Dump

logger = logging.getLogger(__name__)


def _capitalize_first(name: str) -> str:
    return name[:1].upper() + name[1:]


def mark_camelcase_members_deprecated(dump: Dump) -> int:
    """Describe camelCase members as deprecated aliases of their PascalCase twins.

    A member only counts when a member with the capitalised name exists in the
    same class, e.g. ``Part.breakJoints`` next to ``Part.BreakJoints``.

    Returns
    -------
    int
        Number of members marked.
    """
    marked = 0
    for dump_class in dump.classes:
        names = {member.name for member in dump_class.members}
        for member in dump_class.members:
            if not member.name[:1].islower():
                continue
            fixed_name = _capitalize_first(member.name)
            if fixed_name not in names:
                continue
            member.set_description(
                f"`{member.name}` is deprecated. Use `{fixed_name}` instead.",
                ContentSource.HEURISTIC,
            )
            marked += 1
    logger.debug("Marked %d camelCase members as deprecated", marked)
    return marked


__all__ = ["mark_camelcase_members_deprecated"]
