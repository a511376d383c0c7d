"""Load dumpling configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .models import ConfigError, DumplingConfig, HeuristicsConfig

if typ.TYPE_CHECKING:
    from pathlib import Path

_STRING_KEYS = ("title", "pygments_style", "default_description", "class_dir")


def load_config(path: Path | None = None) -> DumplingConfig:
    """Load rendering options from ``path``, or return defaults when ``None``.

    Parameters
    ----------
    path : Path or None, optional
        Filesystem path to a YAML file such as ``dumpling.yaml``. Unknown keys
        are ignored.

    Returns
    -------
    DumplingConfig
        Parsed configuration with defaults applied for absent keys.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    ConfigError
        If the top level is not a mapping or a value has the wrong type.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from dumpling.config import load_config
    >>> load_config().title
    'Rodocs Mini'
    >>> load_config(Path("dumpling.yaml")).class_dir  # doctest: +SKIP
    'class'
    """
    if path is None:
        return DumplingConfig()
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)
    if loaded is None:
        return DumplingConfig()
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    base = DumplingConfig()
    values: dict[str, typ.Any] = {}
    for key in _STRING_KEYS:
        if key not in raw:
            continue
        value = raw[key]
        if not isinstance(value, str) or not value.strip():
            msg = f"'{key}' must be a non-empty string."
            raise ConfigError(msg)
        values[key] = value
    return DumplingConfig(
        title=values.get("title", base.title),
        pygments_style=values.get("pygments_style", base.pygments_style),
        default_description=values.get("default_description", base.default_description),
        class_dir=values.get("class_dir", base.class_dir),
        heuristics=_build_heuristics_config(raw.get("heuristics")),
    )


def _build_heuristics_config(payload: object) -> HeuristicsConfig:
    """Build a HeuristicsConfig from the optional ``heuristics`` mapping."""
    base = HeuristicsConfig()
    match payload:
        case None:
            return base
        case dict():
            enabled = payload.get("camelcase_deprecation", base.camelcase_deprecation)
        case _:
            msg = "'heuristics' must be a mapping."
            raise ConfigError(msg)
    if not isinstance(enabled, bool):
        msg = "'heuristics.camelcase_deprecation' must be a boolean."
        raise ConfigError(msg)
    return HeuristicsConfig(camelcase_deprecation=enabled)


__all__ = ["load_config"]
