"""Debug printing that labels each value with its source expression."""

from dataclasses import replace

from sourceprint.arg_namer import arg_name, expr_to_string, name_arguments
from sourceprint.call_matcher import callee_name, find_call
from sourceprint.composer import LineComposer, display_width
from sourceprint.config import Config
from sourceprint.formatter import ValueFormatter, colorize, render_value
from sourceprint.locator import StackUnavailable, locate
from sourceprint.models import CallSite
from sourceprint.printer import Printer, resolve_names
from sourceprint.source_parser import ParseError, parse

D = Printer()


def configure(**changes) -> None:
    """Update settings of the default printer D, e.g. configure(max_width=120).

    Register import aliases so their calls are named too:

        import sourceprint as sp
        sourceprint.configure(
            callee_names=sourceprint.D.config.callee_names | {"sp.D"}
        )
    """
    D.configure(replace(D.config, **changes))


def set_color_enabled(enabled: bool) -> None:
    """Turn colorized output of the default printer D on or off."""
    configure(color=enabled)


__all__ = [
    # Entry point
    "D",
    "Printer",
    "configure",
    "set_color_enabled",
    # Models and config
    "CallSite",
    "Config",
    # Call-site introspection
    "locate",
    "StackUnavailable",
    "parse",
    "ParseError",
    "find_call",
    "callee_name",
    "name_arguments",
    "arg_name",
    "expr_to_string",
    "resolve_names",
    # Formatting
    "ValueFormatter",
    "render_value",
    "colorize",
    "LineComposer",
    "display_width",
]
