# topmark:header:start
#
#   project      : CodeStamp
#   file         : __init__.py
#   file_relpath : src/codestamp/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""CodeStamp package.

CodeStamp annotates source files with "who changed what, when" comments. It
diffs the buffer being saved against the last saved and last committed
versions, clusters the changed lines, and inserts or refreshes
``Start``/``End`` block stamps or single-line stamps around them.
"""

from __future__ import annotations
