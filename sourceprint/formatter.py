"""Pretty-print and colorize runtime values."""

import logging
from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import is_dataclass
from functools import singledispatch
from typing import Any

from colorama import Fore, Style
from rich.pretty import pretty_repr

from sourceprint.config import Config

logger = logging.getLogger(__name__)

NAME_COLOR = Style.BRIGHT
VALUE_COLOR = Fore.CYAN
RESET = Style.RESET_ALL


def colorize(text: str, color: str, enabled: bool = True) -> str:
    """Wrap text in an ANSI color and a reset, unless color is disabled."""
    if not enabled:
        return text
    return f"{color}{text}{RESET}"


@singledispatch
def render_value(value: Any, max_width: int = 80) -> str:
    """Render a value as readable text.

    Structured objects (dataclasses, objects implementing __rich_repr__) are
    pretty-printed; anything else unrecognized falls back to repr().

    Args:
        value: Any runtime value
        max_width: Width at which nested structures wrap onto more lines

    Returns:
        The rendered text, possibly spanning several lines
    """
    if (is_dataclass(value) and not isinstance(value, type)) or hasattr(
        value, "__rich_repr__"
    ):
        return pretty_repr(value, max_width=max_width)
    return repr(value)


@render_value.register(str)
@render_value.register(bytes)
@render_value.register(int)
@render_value.register(float)
@render_value.register(complex)
@render_value.register(type(None))
def _render_primitive(value: Any, max_width: int = 80) -> str:
    return repr(value)


@render_value.register(list)
@render_value.register(tuple)
@render_value.register(set)
@render_value.register(frozenset)
@render_value.register(deque)
@render_value.register(Mapping)
def _render_structure(value: Any, max_width: int = 80) -> str:
    return pretty_repr(value, max_width=max_width)


class ValueFormatter:
    """Turn runtime values into colorized, pretty-printed strings."""

    def __init__(self, config: Config):
        self._color = config.color
        self._max_width = config.max_width

    def format(self, values: Iterable[Any]) -> list[str]:
        """Format each value in order.

        Args:
            values: Runtime values passed to the printer

        Returns:
            One formatted string per value
        """
        return [
            colorize(self._render(value), VALUE_COLOR, self._color) for value in values
        ]

    def _render(self, value: Any) -> str:
        """Render one value, tolerating objects whose repr fails."""
        type_name = type(value).__name__
        try:
            return render_value(value, self._max_width)
        except Exception as e:
            logger.warning(f"Could not render {type_name} value: {e}")
            return f"<unrepresentable {type_name}>"
