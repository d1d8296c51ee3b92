"""Compose argument names and formatted values into one output line."""

import logging
import re
from collections.abc import Sequence
from pathlib import Path

from rich.cells import cell_len

from sourceprint.config import Config
from sourceprint.formatter import NAME_COLOR, colorize
from sourceprint.models import CallSite

logger = logging.getLogger(__name__)

# CSI sequences such as ESC[1m, ESC[36m and ESC[0m
ANSI_ESCAPE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")

ZERO_WIDTH_CONTROLS = str.maketrans("", "", "\n\t\r\f\v")


def display_width(text: str) -> int:
    """Return the number of terminal cells text occupies when printed.

    Color escape sequences and the control characters newline, tab,
    carriage return, form feed and vertical tab count as zero width.
    """
    visible = ANSI_ESCAPE.sub("", text).translate(ZERO_WIDTH_CONTROLS)
    return cell_len(visible)


def _indent_continuation(value: str, width: int) -> str:
    """Indent every line after the first by width spaces."""
    if "\n" not in value:
        return value
    return value.replace("\n", "\n" + " " * width)


class LineComposer:
    """Pair names with formatted values and join them into a line."""

    def __init__(self, config: Config):
        self._color = config.color

    def prepend_arg_names(
        self, names: Sequence[str], values: Sequence[str]
    ) -> list[str]:
        """Turn names and values into segments like "port=443" or "x + 1=5".

        Named segments get a bold name. Unnamed segments are the value alone.
        Missing names are treated as empty and surplus names are ignored, so
        a name list that disagrees with the value count never fails.

        Args:
            names: Argument names, "" for unnamed arguments
            values: Formatted values

        Returns:
            One segment per value
        """
        if len(names) != len(values):
            logger.debug(
                f"Name count {len(names)} differs from value count {len(values)}"
            )
        padded = list(names[: len(values)])
        padded += [""] * (len(values) - len(padded))

        segments = []
        for name, value in zip(padded, values):
            if not name:
                segments.append(value)
                continue
            prefix = colorize(name, NAME_COLOR, self._color) + "="
            value = _indent_continuation(value, display_width(prefix))
            segments.append(prefix + value)
        return segments

    def compose(
        self,
        site: CallSite | None,
        names: Sequence[str],
        values: Sequence[str],
    ) -> str:
        """Build the full output line.

        The line starts with "<function> <file>:<line>" when the call site is
        known, followed by the segments, all separated by single spaces.

        Args:
            site: Where the printer was called, or None if unknown
            names: Argument names, "" for unnamed arguments
            values: Formatted values

        Returns:
            The output line without a trailing newline
        """
        segments = self.prepend_arg_names(names, values)
        if site is not None:
            location = f"{Path(site.file).name}:{site.line}"
            segments.insert(0, f"{site.function_name} {location}")
        return " ".join(segments)
