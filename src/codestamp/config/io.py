# topmark:header:start
#
#   project      : CodeStamp
#   file         : io.py
#   file_relpath : src/codestamp/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Lightweight TOML I/O helpers for CodeStamp configuration.

Reading and writing both go through `tomlkit`. Reads are unwrapped into plain
Python containers; writes edit the parsed document in place so comments and
formatting of user-maintained files survive (see `update_toml_file`).

Typical flow:
    1. Load project/user TOML files (``load_toml_dict``).
    2. Normalize and inspect values using typed helpers
       (``get_table_value``, ``get_string_value_or_none``, etc.).
    3. Persist single values back (``update_toml_file``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.items import Table

from codestamp.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from codestamp.config.logging import CodestampLogger

logger: CodestampLogger = get_logger(__name__)

TomlTable = dict[str, Any]

__all__: list[str] = [
    "ConfigError",
    "TomlTable",
    "is_toml_table",
    "get_table_value",
    "get_string_value_or_none",
    "get_bool_value_or_none",
    "get_int_value_or_none",
    "get_float_value_or_none",
    "get_list_value",
    "load_toml_dict",
    "to_toml",
    "update_toml_file",
]


class ConfigError(Exception):
    """A configuration file could not be read, parsed, or written."""


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table, or an empty dict if missing or not a mapping."""
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Scalars (``int``, ``float``, ``bool``) are coerced with ``str(...)``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not coercible.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    logger.warning("Ignoring non-string value for '%s': %r", key, value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value; integers are coerced via ``bool()``."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    logger.warning("Ignoring non-boolean value for '%s': %r", key, value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value (booleans are rejected)."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    logger.warning("Ignoring non-integer value for '%s': %r", key, value)
    return None


def get_float_value_or_none(table: TomlTable, key: str) -> float | None:
    """Extract an optional number as a float (booleans are rejected)."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    logger.warning("Ignoring non-numeric value for '%s': %r", key, value)
    return None


def get_list_value(table: TomlTable, key: str, default: list[Any] | None = None) -> list[Any]:
    """Extract a list value, or ``default`` (``[]`` when None) if missing or not a list."""
    value: Any | None = table.get(key)
    if isinstance(value, list):
        return list(value)
    return default or []


def load_toml_dict(path: Path, *, strict: bool = False) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``codestamp.toml`` or ``pyproject.toml``).
        strict (bool): Raise instead of logging when the file cannot be used.
            Explicitly requested files are loaded strictly; discovered ones are not.

    Returns:
        TomlTable: The parsed TOML content (empty on failure when not strict).

    Raises:
        ConfigError: In strict mode, if the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        return tomlkit.parse(text).unwrap()
    except OSError as e:
        if strict:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        logger.error("Error loading TOML from %s: %s", path, e)
    except TomlkitParseError as e:
        if strict:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e
        logger.error("Error decoding TOML from %s: %s", path, e)
    return {}


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string."""
    return tomlkit.dumps(toml_dict)


def update_toml_file(
    path: Path,
    values: Mapping[str, Any],
    *,
    section: tuple[str, ...] = (),
) -> None:
    """Set ``values`` in the TOML file at ``path``, preserving everything else.

    Missing files and parent directories are created. Existing comments and
    formatting are kept because the document is edited through tomlkit nodes.

    Args:
        path (Path): TOML file to update.
        values (Mapping[str, Any]): Keys to set in the target table.
        section (tuple[str, ...]): Dotted path of the target table
            (e.g. ``("tool", "codestamp")``); empty for the top level.

    Raises:
        ConfigError: If the file cannot be parsed or written, or if a key on
            ``section`` is not a table.
    """
    try:
        doc: tomlkit.TOMLDocument = (
            tomlkit.parse(path.read_text(encoding="utf-8")) if path.exists() else tomlkit.document()
        )
    except (OSError, TomlkitParseError) as e:
        raise ConfigError(f"Cannot update config file {path}: {e}") from e

    target: tomlkit.TOMLDocument | Table = doc
    for key in section:
        if key not in target:
            target.add(key, tomlkit.table())
        node = target[key]
        if not isinstance(node, Table):
            raise ConfigError(
                f"Cannot write to [{'.'.join(section)}] in {path}: {key} is not a table"
            )
        target = node

    for key, value in values.items():
        target[key] = value

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot write config file {path}: {e}") from e
    logger.info("Updated %s: %s", path, ", ".join(values))
