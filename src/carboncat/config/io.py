# topmark:header:start
#
#   project      : CarbonCat
#   file         : io.py
#   file_relpath : src/carboncat/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

CarbonCat reads formatting defaults from TOML files passed with ``--config``:

- ``pyproject.toml``: the ``[tool.carboncat]`` table;
- any other file: a ``[carboncat]`` table if present, else the top-level table.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from carboncat.config.logging import get_logger
from carboncat.config.model import MutableOptions
from carboncat.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from carboncat.config.logging import CarboncatLogger

TomlTable = dict[str, Any]

#: Section name used both as ``[tool.<name>]`` and as a top-level table.
TOML_SECTION: str = "carboncat"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

logger: CarboncatLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``carboncat.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"{path}: {e.strerror or e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"{path}: invalid TOML: {e}") from e
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_options_table(data: TomlTable, *, is_pyproject: bool) -> TomlTable:
    """Select the table holding CarbonCat options from a parsed document.

    Args:
        data (TomlTable): Parsed TOML document.
        is_pyproject (bool): Whether the document is a ``pyproject.toml``.

    Returns:
        TomlTable: The options table (possibly empty).
    """
    if is_pyproject:
        tool: Any = data.get("tool", {})
        table: Any = tool.get(TOML_SECTION, {}) if isinstance(tool, dict) else {}
    else:
        table = data.get(TOML_SECTION, data)
    if not isinstance(table, dict):
        return {}
    return cast("TomlTable", table)


def load_options_file(path: Path) -> MutableOptions:
    """Load a single config file into a tri-state builder.

    Args:
        path (Path): Config file path.

    Returns:
        MutableOptions: Options declared by the file; undeclared keys stay unset.
    """
    data: TomlTable = load_toml_dict(path)
    table: TomlTable = extract_options_table(data, is_pyproject=path.name == PYPROJECT_TOML_NAME)
    logger.debug("Loaded options table from %s: %s", path, table)
    return MutableOptions.from_toml_table(table, source=str(path))


def load_merged(config_files: Iterable[Path]) -> MutableOptions:
    """Merge config files in order (last wins) into one builder.

    Args:
        config_files (Iterable[Path]): Config files in precedence order, lowest first.

    Returns:
        MutableOptions: The merged builder.
    """
    merged = MutableOptions()
    for path in config_files:
        merged = merged.merge_with(load_options_file(path))
    return merged


def to_toml(table: TomlTable) -> str:
    """Render a table as a ``[carboncat]`` TOML document.

    Args:
        table (TomlTable): Options table, e.g. from `Options.to_toml_dict`.

    Returns:
        str: The TOML text.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    section = tomlkit.table()
    for key, value in table.items():
        section.add(key, value)
    doc.add(TOML_SECTION, section)
    return tomlkit.dumps(doc)
