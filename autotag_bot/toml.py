"""Project-level defaults from pyproject.toml.

Uses tomlkit to read an optional ``[tool.autotag]`` table, so a
repository can keep its version pattern next to its packaging metadata:

    [tool.autotag]
    source-file = "pyproject.toml"
    version-pattern = '^version = "(?P<version>[^"]+)"'
    tag-format = "v{version}"
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import tomlkit

CONFIG_KEYS = ("source-file", "version-pattern", "tag-format")


def load_pyproject(path: Path) -> tomlkit.TOMLDocument:
    return tomlkit.parse(path.read_text())


def get_autotag_defaults(doc: tomlkit.TOMLDocument) -> dict[str, str]:
    """Extract the known keys of [tool.autotag], with underscores as separators.

    Returns:
        e.g. {"source_file": "pyproject.toml", "tag_format": "v{version}"}.
        Keys that are absent are left out.
    """
    tool = doc.get("tool", {})
    table = tool.get("autotag", {}) if isinstance(tool, Mapping) else {}
    if not isinstance(table, Mapping):
        return {}
    return {
        key.replace("-", "_"): str(table[key]) for key in CONFIG_KEYS if key in table
    }


def load_defaults(root: Path | None = None) -> dict[str, str]:
    """Read [tool.autotag] from ``root/pyproject.toml`` if the file exists.

    Raises:
        tomlkit.exceptions.ParseError: If the file is not valid TOML.
    """
    pyproject = (root or Path.cwd()) / "pyproject.toml"
    if not pyproject.exists():
        return {}
    return get_autotag_defaults(load_pyproject(pyproject))
