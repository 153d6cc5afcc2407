# topmark:header:start
#
#   project      : CodeStamp
#   file         : __init__.py
#   file_relpath : src/codestamp/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Configuration handling for CodeStamp.

Exposes the immutable [`Config`][codestamp.config.model.Config], its builder
[`MutableConfig`][codestamp.config.model.MutableConfig], and
[`save_author_name`][codestamp.config.model.save_author_name]. TOML is read and
written with tomlkit; see [`codestamp.config.io`][codestamp.config.io].
"""

from __future__ import annotations

from codestamp.config.io import ConfigError
from codestamp.config.model import ArgsLike, Config, MutableConfig, save_author_name

__all__ = [
    "ArgsLike",
    "Config",
    "ConfigError",
    "MutableConfig",
    "save_author_name",
]
