# topmark:header:start
#
#   project      : CodeStamp
#   file         : __init__.py
#   file_relpath : src/codestamp/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""CodeStamp processing pipeline package.

This package wires the engine into one save of one document:

- Context handling and shared state between steps
- Step implementations (resolver, reader, snapshot, vcs, stamper, writer, etc.)
- Pipeline assembly and execution helpers
- Status enums used to coordinate step behavior

The public API is composed of the named pipelines in
[`codestamp.pipeline.pipelines`][codestamp.pipeline.pipelines], the execution helper in
[`codestamp.pipeline.runner`][codestamp.pipeline.runner], and the shared context model in
[`codestamp.pipeline.context`][codestamp.pipeline.context].
"""
