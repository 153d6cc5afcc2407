# topmark:header:start
#
#   project      : CodeStamp
#   file         : __main__.py
#   file_relpath : src/codestamp/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Module entry point for running CodeStamp via ``python -m codestamp``.

Delegates to :func:`codestamp.cli.main.cli`, the single CLI entry point.

Examples:
    Stamp a buffer piped in by an editor::

        cat main.py | python -m codestamp stamp - --stdin-filename main.py
"""

from __future__ import annotations

from codestamp.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
