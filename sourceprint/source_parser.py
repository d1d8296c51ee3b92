"""Parse Python source files into syntax trees."""

import ast
import logging
import tokenize
from pathlib import Path

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Error reading or parsing a source file."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


def parse(file: str | Path) -> ast.Module:
    """Read and parse a whole Python source file.

    The file is read fresh on every call; trees are never cached.

    Args:
        file: Path to the source file

    Returns:
        The parsed module

    Raises:
        ParseError: If the file cannot be read or is not valid Python
    """
    path = str(file)
    try:
        # tokenize.open honors PEP 263 encoding declarations
        with tokenize.open(path) as f:
            source = f.read()
        tree = ast.parse(source, filename=path)
    except (OSError, SyntaxError, ValueError, RecursionError, MemoryError) as e:
        logger.debug(f"Failed to parse {path}: {e}")
        raise ParseError(f"Failed to parse {path!r}: {e}", path) from e

    logger.debug(f"Parsed {path}")
    return tree
