"""
sexpc AST Transformer - Converts the source AST into the target AST.

This module contains the Transformer class that walks the parsed source tree
depth-first, parent before children, and returns the matching target tree.
The walk keeps its own stack of open nodes, so deep nesting does not grow the
Python call stack.
"""

from sexpc import source_ast, target_ast
from sexpc.errors import ErrorCode, TransformError

# Source node class -> field holding its children
CHILD_FIELDS = {
    source_ast.Program: "body",
    source_ast.CallExpression: "params",
}


class _Frame:
    """A source node being transformed, with its children still to visit."""

    def __init__(self, node, parent, handler):
        self.node = node
        self.parent = parent
        self.handler = handler
        field = CHILD_FIELDS.get(type(node))
        self.pending = iter(getattr(node, field) if field else ())
        self.children = []


class Transformer:
    """
    Transforms source AST nodes into target AST nodes.

    Each handler receives the target nodes already built for its children and
    returns the node it builds, so no target list is shared between handlers.
    The source parent is passed along to decide whether a call becomes a statement.

    Optional hooks are called with (node, parent) as each source node is
    entered, before its children, and exited, after them.
    """

    def __init__(self, on_enter=None, on_exit=None):
        """
        Initialize the transformer.

        Args:
            on_enter: Optional callback invoked in pre-order.
            on_exit: Optional callback invoked in post-order.
        """
        self._on_enter = on_enter
        self._on_exit = on_exit
        self._handlers = {
            source_ast.Program: self.program,
            source_ast.CallExpression: self.call_expression,
            source_ast.NumberLiteral: self.number_literal,
            source_ast.StringLiteral: self.string_literal,
        }

    def transform(self, node, parent=None):
        """Transform one source node (and its subtree) into a target node."""
        stack = [self._enter(node, parent)]
        while True:
            frame = stack[-1]
            child = next(frame.pending, None)
            if child is not None:
                stack.append(self._enter(child, frame.node))
                continue

            stack.pop()
            result = frame.handler(frame.node, frame.parent, frame.children)
            if self._on_exit:
                self._on_exit(frame.node, frame.parent)
            if not stack:
                return result
            stack[-1].children.append(result)

    def _enter(self, node, parent):
        handler = self._handlers.get(type(node))
        if handler is None:
            kind = getattr(node, "type", type(node).__name__)
            raise TransformError(ErrorCode.UNHANDLED_NODE_KIND, kind=kind)

        if self._on_enter:
            self._on_enter(node, parent)
        return _Frame(node, parent, handler)

    def program(self, node, parent, children):
        """Program -> Program with the transformed body."""
        return target_ast.Program(body=children)

    def call_expression(self, node, parent, children):
        """Call -> CallExpression with an Identifier callee; top-level calls become statements."""
        expression = target_ast.CallExpression(
            callee=target_ast.Identifier(name=node.name),
            arguments=children,
        )
        if isinstance(parent, source_ast.CallExpression):
            return expression
        return target_ast.ExpressionStatement(expression=expression)

    def number_literal(self, node, parent, children):
        return target_ast.NumberLiteral(value=node.value)

    def string_literal(self, node, parent, children):
        return target_ast.StringLiteral(value=node.value)


def transform(ast, on_enter=None, on_exit=None):
    """Transform a source Program into a target Program."""
    return Transformer(on_enter=on_enter, on_exit=on_exit).transform(ast)
