# topmark:header:start
#
#   project      : CodeStamp
#   file         : colored_enum.py
#   file_relpath : src/codestamp/utils/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""String enum whose members carry a colorizer for terminal output.

The pipeline status axes (`codestamp.pipeline.status`) are `ColoredStrEnum`
subclasses: the member value is the plain, human-readable status text and the
colorizer decides how the CLI renders it.

Key types:
    - `Colorizer`: Protocol for any callable shaped like
      `yachalk.ChalkBuilder.__call__`.
    - `ColoredStrEnum`: `str, Enum` holding a textual value plus a colorizer
      exposed as `.color`.

Design:
    The colorizer is stored beside `_value_` rather than inside it, so the
    member value stays a scalar string. Equality, hashing and `repr` keep their
    normal Enum behavior and statuses compare cleanly with ``==``.

Example:
    ```python
    from yachalk import chalk

    class Outcome(ColoredStrEnum):
        OK = ("ok", chalk.green)
        FAILED = ("failed", chalk.red_bright)

    Outcome.OK.value           # 'ok'
    Outcome.OK.color("hello")  # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Matches `yachalk.ChalkBuilder.__call__`. CodeStamp always calls colorizers
    with a single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Decorate and join ``args`` into one display string.

        Args:
            *args (object): Values to render, typically one string.
            sep (str): Separator placed between multiple values.

        Returns:
            str: The decorated text.
        """
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a plain string, with the colorizer stored beside it."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Build one member from its ``(text, colorizer)`` definition tuple.

        Args:
            text (str): Human-readable value of the member.
            color (Colorizer): Callable used to render ``text`` in a terminal.

        Returns:
            ColoredStrEnum: The new member, a `str` equal to ``text``.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the member.

        Returns:
            str: The plain status text, without color codes.
        """
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer attached to the member.

        Returns:
            Colorizer: Callable decorating a string in the member's color.
        """
        return self._color
