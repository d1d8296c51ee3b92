"""Run the printing pipeline for one call."""

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, TextIO

from sourceprint.arg_namer import name_arguments, starred_indexes
from sourceprint.call_matcher import find_call
from sourceprint.composer import LineComposer
from sourceprint.config import Config
from sourceprint.formatter import ValueFormatter
from sourceprint.locator import StackUnavailable, locate
from sourceprint.models import CallSite
from sourceprint.source_parser import ParseError, parse

logger = logging.getLogger(__name__)

# Frames between locate() and user code: only Printer.__call__
CALLER_DEPTH = 1


def align_names(names: list[str], starred: list[int], value_count: int) -> list[str]:
    """Line up argument names with runtime values around *expansions.

    Names before the first *expansion always line up. With a single
    expansion, names after it are aligned from the end of the values and the
    expanded values get empty names. With more than one, the length of each
    expansion is unknown, so only the names before the first are kept.

    Args:
        names: One name per argument expression
        starred: Positions of the *expansion arguments
        value_count: Number of runtime values passed to the printer

    Returns:
        Names index-aligned with the values, possibly shorter than them
    """
    if not starred:
        return names

    first = starred[0]
    head = names[:first]
    if len(starred) > 1:
        return head

    tail = names[first + 1 :]
    expanded = value_count - first - len(tail)
    if expanded < 0:
        return head
    return head + [""] * expanded + tail


def resolve_names(
    site: CallSite,
    callee_names: set[str] | frozenset[str],
    value_count: int,
) -> list[str]:
    """Find the call at site and return its argument names.

    Falls back to all-empty names when the source cannot be parsed or no
    matching call ends on the site's line.

    Args:
        site: Where the printer was called
        callee_names: Accepted bare and qualified callee names
        value_count: Number of runtime values passed to the printer

    Returns:
        Argument names, "" for unnamed arguments
    """
    try:
        tree = parse(site.file)
    except ParseError as e:
        logger.debug(f"Printing without names: {e}")
        return [""] * value_count

    call = find_call(tree, site.line, callee_names)
    if call is None:
        logger.debug(f"Printing without names: no call at {site.file}:{site.line}")
        return [""] * value_count

    return align_names(name_arguments(call), starred_indexes(call), value_count)


@dataclass(frozen=True)
class _Pipeline:
    """Components built from one config, swapped as a unit."""

    config: Config
    formatter: ValueFormatter
    composer: LineComposer

    @classmethod
    def build(cls, config: Config) -> "_Pipeline":
        return cls(config, ValueFormatter(config), LineComposer(config))


class Printer:
    """Print values annotated with the source text that produced them."""

    def __init__(self, config: Config | None = None, stream: TextIO | None = None):
        """Initialize the printer.

        Args:
            config: Printer settings, read from the environment if omitted
            stream: Where lines are written, sys.stderr at call time if omitted
        """
        self._stream = stream
        self.configure(config if config is not None else Config.from_env())

    @property
    def config(self) -> Config:
        return self._pipeline.config

    def configure(self, config: Config) -> None:
        """Replace the config and the components that depend on it.

        Calls already rendering keep the components they started with.
        """
        self._pipeline = _Pipeline.build(config)

    def __call__(self, *values: Any) -> None:
        try:
            site = locate(CALLER_DEPTH)
        except StackUnavailable as e:
            logger.debug(f"Printing without call site: {e}")
            site = None

        line = self.render(values, site)
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(line + "\n")

    def render(self, values: Sequence[Any], site: CallSite | None) -> str:
        """Build the output line for values printed from site.

        Args:
            values: Runtime values passed to the printer
            site: Where the printer was called, or None if unknown

        Returns:
            The output line without a trailing newline
        """
        pipeline = self._pipeline
        if site is None:
            names = [""] * len(values)
        else:
            names = resolve_names(site, pipeline.config.callee_names, len(values))
        formatted = pipeline.formatter.format(values)
        return pipeline.composer.compose(site, names, formatted)
