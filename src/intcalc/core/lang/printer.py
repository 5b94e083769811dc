"""
Debug printer for syntax trees.

Renders one node per line, children indented beneath their parent:

    └──BinaryExpression
       ├──NumberExpression
       │  └──NumberToken 1
       ├──PlusToken
       └──NumberExpression
          └──NumberToken 2
"""

from __future__ import annotations

from intcalc.core.ir.syntax import SyntaxNode, SyntaxToken

_BRANCH = "├──"
_LAST_BRANCH = "└──"
_PIPE_INDENT = "│  "
_BLANK_INDENT = "   "


def format_tree(node: SyntaxNode) -> str:
    """Render a subtree as text, one line per node."""
    lines: list[str] = []
    stack: list[tuple[SyntaxNode, str, bool]] = [(node, "", True)]

    while stack:
        current, indent, is_last = stack.pop()
        marker = _LAST_BRANCH if is_last else _BRANCH
        lines.append(f"{indent}{marker}{_label(current)}")

        child_indent = indent + (_BLANK_INDENT if is_last else _PIPE_INDENT)
        children = current.get_children()
        # Pushed in reverse so the first child is rendered first
        for i in range(len(children) - 1, -1, -1):
            stack.append((children[i], child_indent, i == len(children) - 1))

    return "\n".join(lines)


def _label(node: SyntaxNode) -> str:
    label = str(node.kind)
    if isinstance(node, SyntaxToken) and node.value is not None:
        label = f"{label} {node.value}"
    return label
