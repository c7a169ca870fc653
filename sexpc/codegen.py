"""
sexpc Code Generator - Renders the target AST as C-like call syntax.

Nodes are rendered after their children, using an explicit stack so that
nesting depth is not limited by the Python call stack.
"""

from sexpc import target_ast
from sexpc.errors import CodeGenError, ErrorCode


def generate(node) -> str:
    """Render a target AST node and its subtree as output text."""
    # [node, children still to render, rendered children]
    stack = [_open(node)]
    while True:
        current, pending, parts = stack[-1]
        child = next(pending, None)
        if child is not None:
            stack.append(_open(child))
            continue

        stack.pop()
        text = _render(current, parts)
        if not stack:
            return text
        stack[-1][2].append(text)


def _open(node):
    return [node, iter(_children(node)), []]


def _children(node):
    if isinstance(node, target_ast.Program):
        return node.body

    if isinstance(node, target_ast.ExpressionStatement):
        return [node.expression]

    if isinstance(node, target_ast.CallExpression):
        return [node.callee, *node.arguments]

    if isinstance(node, (target_ast.Identifier, target_ast.NumberLiteral, target_ast.StringLiteral)):
        return []

    kind = getattr(node, "type", type(node).__name__)
    raise CodeGenError(ErrorCode.UNHANDLED_NODE_KIND, kind=kind)


def _render(node, parts):
    # parts holds the rendered children, in _children() order
    if isinstance(node, target_ast.Program):
        return "\n".join(parts)

    if isinstance(node, target_ast.ExpressionStatement):
        return f"{parts[0]};"

    if isinstance(node, target_ast.CallExpression):
        callee, *args = parts
        return f"{callee}({', '.join(args)})"

    if isinstance(node, target_ast.Identifier):
        return node.name

    if isinstance(node, target_ast.NumberLiteral):
        # Digit text is kept exactly as written
        return node.value

    return f'"{node.value}"'
