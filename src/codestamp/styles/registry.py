# topmark:header:start
#
#   project      : CodeStamp
#   file         : registry.py
#   file_relpath : src/codestamp/styles/registry.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Language registry and comment style resolution.

Two lookups live here:

* `detect_language` maps a file path to a language identifier. Hosts that know
  the language (editors) pass their own id instead.
* `resolve_comment_style` maps a language identifier plus file name to a
  `CommentStyle`. It always returns a style: unknown languages fall back to
  ``//``, except dotfile-style names (``.gitignore``, ``.env``) which get ``#``
  stamps above the changed line.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import PurePath
from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.styles.base import POUND, SLASH, XML, CommentStyle, Language
from codestamp.styles.languages import LANGUAGES

if TYPE_CHECKING:
    from collections.abc import Mapping

    from codestamp.config.logging import CodestampLogger

logger: CodestampLogger = get_logger(__name__)

#: Language id reported when a path matches no known language.
PLAINTEXT: str = "plaintext"

# Editor language ids that share a family with a built-in language
_STYLE_ALIASES: dict[str, CommentStyle] = {
    "gitignore": POUND,
    "dotenv": POUND,
    "svg": XML,
    "vue-html": XML,
    "xsl": XML,
}

# Names whose fallback style is '#', stamped above
_POUND_FALLBACK_SUFFIXES: tuple[str, ...] = (".gitignore", ".env")


@lru_cache(maxsize=1)
def get_language_registry() -> dict[str, Language]:
    """Return the built-in languages keyed by name.

    Returns:
        dict[str, Language]: Mapping of language identifier to definition.

    Raises:
        ValueError: If two built-in languages share a name.
    """
    registry: dict[str, Language] = {}
    for language in LANGUAGES:
        if language.name in registry:
            raise ValueError(f"Duplicate language definition: {language.name}")
        registry[language.name] = language
    return registry


def detect_language(
    path: PurePath | str,
    *,
    overrides: Mapping[str, str] | None = None,
) -> str:
    """Return the language identifier for ``path``.

    Args:
        path (PurePath | str): File path (only the name is inspected).
        overrides (Mapping[str, str] | None): Extra ``extension -> language id``
            associations from configuration; checked before the built-ins.

    Returns:
        str: The language id, or ``"plaintext"`` when nothing matches.
    """
    p = PurePath(path)
    if overrides:
        for ext, language_id in overrides.items():
            if p.name == ext or p.name.endswith(ext):
                logger.trace("Language override %s -> %s for %s", ext, language_id, p)
                return language_id

    for language in get_language_registry().values():
        if language.matches(p):
            logger.trace("Detected language %s for %s", language.name, p)
            return language.name

    logger.debug("No language matched %s; using %s", p, PLAINTEXT)
    return PLAINTEXT


def is_stampable(language_id: str) -> bool:
    """Return False for known languages that must never be stamped (no comment syntax)."""
    language: Language | None = get_language_registry().get(language_id)
    return language is None or not language.skip_processing


def resolve_comment_style(language_id: str, filename: str) -> CommentStyle:
    """Return the comment style to use for a document.

    Args:
        language_id (str): Language identifier (editor-provided or detected).
        filename (str): File name or path of the document.

    Returns:
        CommentStyle: The style for the language; never fails.
    """
    language: Language | None = get_language_registry().get(language_id)
    if language is not None and not language.skip_processing:
        return language.style
    if language_id in _STYLE_ALIASES:
        return _STYLE_ALIASES[language_id]
    if filename.endswith(_POUND_FALLBACK_SUFFIXES):
        return POUND
    return SLASH
