"""Find the debug-print call expression on a given source line."""

import ast
import logging
from collections.abc import Iterator

logger = logging.getLogger(__name__)


def callee_name(call: ast.Call) -> str | None:
    """Render the callee of a call as a dotted name.

    D(...) gives "D" and sourceprint.D(...) gives "sourceprint.D". Callees
    that are not a name or an attribute on a name (e.g. f()(...),
    items[0](...), a.b.c(...)) give None.
    """
    func = call.func
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute) and isinstance(func.value, ast.Name):
        # func.value is the namespace preceding the dot
        return f"{func.value.id}.{func.attr}"
    return None


def iter_calls(node: ast.AST) -> Iterator[ast.Call]:
    """Yield every call expression under node in pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, ast.Call):
            yield current
        # Reversed so children come off the stack in field order
        stack.extend(reversed(list(ast.iter_child_nodes(current))))


def find_call(
    tree: ast.AST,
    target_line: int,
    callee_names: set[str] | frozenset[str],
) -> ast.Call | None:
    """Find the call to one of callee_names that ends on target_line.

    Calls are matched by their closing line, which is the line the runtime
    reports for the call instruction. When several calls qualify, the first
    in pre-order traversal wins; this is a fixed tie-break, not an attempt
    to pick the call that actually ran.

    Args:
        tree: Parsed source file
        target_line: Line number reported for the call
        callee_names: Accepted bare and qualified callee names

    Returns:
        The matching call, or None if no call on that line qualifies
    """
    for call in iter_calls(tree):
        if call.end_lineno != target_line:
            # Right kind of node, wrong line
            continue
        if callee_name(call) not in callee_names:
            continue
        logger.debug(
            f"Matched call at line {target_line} with {len(call.args)} arguments"
        )
        return call

    logger.debug(f"No call to {sorted(callee_names)} ends on line {target_line}")
    return None
