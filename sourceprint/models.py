"""Data models shared across the printing pipeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CallSite:
    """The location of a debug-print call in the caller's source."""

    function_name: str  # e.g. "Handler.serve", "<module>"
    file: str  # absolute path
    line: int  # closing line of the call expression
