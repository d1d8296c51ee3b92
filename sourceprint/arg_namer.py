"""Recover the source text of a call's arguments."""

import ast
import logging

logger = logging.getLogger(__name__)

# Expression kinds whose source text is worth showing next to the value
NAMEABLE_EXPRESSIONS = (
    ast.Attribute,
    ast.BinOp,
    ast.BoolOp,
    ast.Call,
    ast.Compare,
    ast.Subscript,
    ast.UnaryOp,
)

TAB_WIDTH = 4


def expr_to_string(expr: ast.expr) -> str:
    """Reconstruct the source text of an expression from its tree.

    Whitespace is normalized by the unparser, and tabs are expanded so the
    text renders predictably in a terminal.
    """
    return ast.unparse(expr).replace("\t", " " * TAB_WIDTH)


def arg_name(expr: ast.expr) -> str:
    """Return the name to display for one argument expression.

    Identifiers give their own text; compound expressions such as x + 1,
    cfg.port or items[0] give their reconstructed source. Literals and any
    other expression kind give "".

    Args:
        expr: An argument of the matched call

    Returns:
        The argument's display name, or "" if it has none
    """
    if isinstance(expr, ast.Name):
        return expr.id
    if isinstance(expr, NAMEABLE_EXPRESSIONS):
        return expr_to_string(expr)
    return ""


def name_arguments(call: ast.Call) -> list[str]:
    """Return display names for every positional argument of call.

    For example, D(ip, port, 5432) gives ["ip", "port", ""]. The result is
    always as long as call.args.
    """
    names = [arg_name(arg) for arg in call.args]
    logger.debug(f"Argument names: {names}")
    return names


def starred_indexes(call: ast.Call) -> list[int]:
    """Return the positions of the *expansion arguments of call."""
    return [
        index for index, arg in enumerate(call.args) if isinstance(arg, ast.Starred)
    ]
