"""Typed dataclasses describing dumpling configuration."""

from __future__ import annotations

import dataclasses as dc

from dumpling._constants import DEFAULT_CLASS_DIR, DEFAULT_DESCRIPTION, DEFAULT_TITLE


class ConfigError(ValueError):
    """Raised when the configuration file is invalid."""


@dc.dataclass(slots=True)
class HeuristicsConfig:
    """Toggles for description heuristics."""

    camelcase_deprecation: bool = True


@dc.dataclass(slots=True)
class DumplingConfig:
    """Rendering options shared by every output command.

    Attributes
    ----------
    title : str
        Document title of the single-page wiki.
    pygments_style : str
        Pygments style used for code blocks inside descriptions.
    default_description : str
        Markdown shown for classes and members with no description.
    class_dir : str
        Folder, relative to the site output directory, that holds class pages.
    heuristics : HeuristicsConfig
        Which heuristics run while merging descriptions.
    """

    title: str = DEFAULT_TITLE
    pygments_style: str = "monokai"
    default_description: str = DEFAULT_DESCRIPTION
    class_dir: str = DEFAULT_CLASS_DIR
    heuristics: HeuristicsConfig = dc.field(default_factory=HeuristicsConfig)


__all__ = ["ConfigError", "DumplingConfig", "HeuristicsConfig"]
