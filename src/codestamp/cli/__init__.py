# topmark:header:start
#
#   project      : CodeStamp
#   file         : __init__.py
#   file_relpath : src/codestamp/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Click-based command-line interface for CodeStamp.

The entry point is [`codestamp.cli.main.cli`][codestamp.cli.main.cli]; commands live
in `codestamp.cli.commands`.
"""
