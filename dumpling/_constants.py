"""Common literal values used across dumpling.

These constants keep the primitive type table, fence markers, and default copy
in one place so the index, parsers, templates, and tests import the same
values without drifting. Intended for internal use within the dumpling package.

Examples
--------
>>> from dumpling import _constants
>>> "int64" in _constants.PRIMITIVE_TYPES
True
>>> _constants.ENUM_PREFIX
'Enum'
"""

PRIMITIVE_TYPES = frozenset(("bool", "double", "float", "int", "int64", "string", "void"))

ENUM_PREFIX = "Enum"

# +++ fences TOML metadata the way Hugo front matter does; --- would mean YAML.
METADATA_FENCE = "+++"

DEFAULT_TITLE = "Rodocs Mini"
DEFAULT_DESCRIPTION = "*No description available.*"
DEFAULT_CLASS_DIR = "class"

SIGNAL_TYPE_NAME = "RBXScriptSignal"
DEPRECATED_TAG = "Deprecated"
