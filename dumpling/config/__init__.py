"""Load and validate dumpling configuration YAML.

This subpackage parses an optional ``dumpling.yaml`` file with rendering
options (page title, Pygments style, default description, class page folder,
heuristic toggles) into :class:`DumplingConfig`. The primary entry point is
:func:`load_config`, which applies defaults for absent keys.

Examples
--------
>>> from pathlib import Path
>>> from dumpling.config import load_config
>>> config = load_config(Path("dumpling.yaml"))  # doctest: +SKIP
>>> config.pygments_style  # doctest: +SKIP
'monokai'
"""

from .loader import load_config
from .models import ConfigError, DumplingConfig, HeuristicsConfig

__all__ = [
    "ConfigError",
    "DumplingConfig",
    "HeuristicsConfig",
    "load_config",
]
