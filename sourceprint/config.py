"""Printer configuration."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

PACKAGE_NAME = "sourceprint"
ENTRY_NAME = "D"

DEFAULT_CALLEE_NAMES = frozenset({ENTRY_NAME, f"{PACKAGE_NAME}.{ENTRY_NAME}"})


@dataclass(frozen=True)
class Config:
    """Settings threaded into the formatter and composer at construction.

    callee_names lists how calls to the printer are written in source. The
    default recognizes D(...) and sourceprint.D(...) only; a printer reached
    through an alias, e.g. "import sourceprint as sp" or
    "from sourceprint import D as dbg", prints no names unless "sp.D" or
    "dbg" is added here.
    """

    color: bool = True
    callee_names: frozenset[str] = field(default=DEFAULT_CALLEE_NAMES)
    max_width: int = 80  # wrap width for nested values

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """Build a config from environment variables.

        NO_COLOR (any non-empty value) disables color. SOURCEPRINT_COLOR set
        to "0" or "1" overrides it.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            Config with the color setting applied
        """
        if environ is None:
            environ = os.environ

        color = not environ.get("NO_COLOR")
        override = environ.get("SOURCEPRINT_COLOR", "").strip()
        if override in ("0", "1"):
            color = override == "1"
        return cls(color=color)
