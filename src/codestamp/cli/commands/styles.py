# topmark:header:start
#
#   project      : CodeStamp
#   file         : styles.py
#   file_relpath : src/codestamp/cli/commands/styles.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""CodeStamp `styles` command.

Lists the built-in languages and the comment style their stamps use. With
``-v`` the file extensions and names of each language are shown as well.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from codestamp.styles import get_language_registry

if TYPE_CHECKING:
    from codestamp.cli.console import ClickConsole
    from codestamp.styles import Language


def _style_label(language: Language) -> str:
    if language.skip_processing:
        return "(not stamped)"
    style = language.style
    label: str = f"{style.prefix} ... {style.suffix}" if style.suffix else style.prefix
    return f"{label} (above)" if style.force_above else label


@click.command(
    name="styles",
    help="List supported languages and their comment styles.",
)
def styles_command() -> None:
    """List supported languages and their comment styles."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    verbose: bool = ctx.obj.get("verbosity_level", logging.WARNING) <= logging.INFO

    registry: dict[str, Language] = get_language_registry()
    width: int = max(len(name) for name in registry)
    for name in sorted(registry):
        language: Language = registry[name]
        console.print(f"{console.styled(name.ljust(width), bold=True)}  {_style_label(language)}")
        if verbose:
            matches: list[str] = [*language.extensions, *language.filenames]
            if matches:
                console.print(f"{' ' * width}  {', '.join(matches)}")
