# topmark:header:start
#
#   project      : CodeStamp
#   file         : __init__.py
#   file_relpath : src/codestamp/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""CodeStamp change-annotation engine.

The engine reasons purely over lines of text:

- [`codestamp.engine.diff`][codestamp.engine.diff] computes line-level diffs
- [`codestamp.engine.ranges`][codestamp.engine.ranges] extracts and clusters changed ranges
- [`codestamp.engine.revert`][codestamp.engine.revert] restores stamp-only differences
- [`codestamp.engine.blocks`][codestamp.engine.blocks] decides which stamp to write
- [`codestamp.engine.plan`][codestamp.engine.plan] turns decisions into non-overlapping edits

Nothing in this package touches the file system or spawns processes; see
[`codestamp.pipeline`][codestamp.pipeline] for the wiring around one save.
"""
