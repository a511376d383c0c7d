"""Assemble the final API model from the dump and every description source.

Sources are merged in a fixed order and later sources win: reflection metadata
summaries, then heuristics, then community supplemental content. The result is
what the symbol index and the HTML or JSON emitters consume.

Example
-------
>>> from pathlib import Path
>>> from dumpling.pipeline import load_dump
>>> dump = load_dump(
...     Path("API-Dump.json"), content_path=Path("content")
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ

from .config import DumplingConfig
from .dump import read_dump
from .heuristics import mark_camelcase_members_deprecated
from .reflection_metadata import apply_reflection_metadata, read_reflection_metadata
from .supplement import apply_supplemental_content, read_supplemental_content

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .dump import Dump

logger = logging.getLogger(__name__)


def load_dump(
    dump_path: Path,
    *,
    metadata_path: Path | None = None,
    content_path: Path | None = None,
    config: DumplingConfig | None = None,
) -> Dump:
    """Read the API dump and merge descriptions onto it.

    Parameters
    ----------
    dump_path : Path
        JSON API dump.
    metadata_path : Path, optional
        Reflection metadata XML; skipped when ``None``.
    content_path : Path, optional
        Supplemental content file or directory; skipped when ``None``.
    config : DumplingConfig, optional
        Controls which heuristics run; defaults to :class:`DumplingConfig`.

    Returns
    -------
    Dump
        The merged model.

    Raises
    ------
    FileNotFoundError
        If any given path does not exist.
    DumpLoadError, ReflectionMetadataError, SupplementError
        If an input file is malformed.
    """
    settings = config or DumplingConfig()
    dump = read_dump(dump_path)
    logger.info("Loaded %d classes from %s", len(dump.classes), dump_path)

    if metadata_path is not None:
        metadata = read_reflection_metadata(metadata_path)
        applied = apply_reflection_metadata(dump, metadata)
        logger.info("Applied %d reflection metadata summaries", applied)

    if settings.heuristics.camelcase_deprecation:
        marked = mark_camelcase_members_deprecated(dump)
        logger.info("Marked %d camelCase members as deprecated", marked)

    if content_path is not None:
        items = read_supplemental_content(content_path)
        unmatched = apply_supplemental_content(dump, items)
        for target in unmatched:
            logger.warning("Supplemental content targets unknown item %r", target)
        logger.info(
            "Applied %d of %d supplemental descriptions",
            len(items) - len(unmatched),
            len(items),
        )
    return dump


__all__ = ["load_dump"]
