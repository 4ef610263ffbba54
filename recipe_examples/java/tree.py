"""Helpers over tree-sitter Java syntax trees.

Node text access, argument lists, pruned walks, a visitor base with
per-node-type dispatch, and decoding of Java literals (including text
blocks) into their runtime values.
"""

import re
from collections.abc import Callable, Iterator

from tree_sitter import Node

COMMENT_TYPES = frozenset({"line_comment", "block_comment"})

INTEGER_LITERAL_TYPES = frozenset({
    "decimal_integer_literal",
    "hex_integer_literal",
    "octal_integer_literal",
    "binary_integer_literal",
})
FLOAT_LITERAL_TYPES = frozenset({"decimal_floating_point_literal", "hex_floating_point_literal"})
LITERAL_TYPES = INTEGER_LITERAL_TYPES | FLOAT_LITERAL_TYPES | frozenset({
    "string_literal",
    "character_literal",
    "true",
    "false",
    "null_literal",
})

_ESCAPES = {
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "f": "\f",
    "r": "\r",
    "s": " ",
    '"': '"',
    "'": "'",
    "\\": "\\",
}
_ESCAPE_RE = re.compile(r"\\(u+[0-9a-fA-F]{4}|[0-3][0-7]{0,2}|[4-7][0-7]?|\n|.)", re.DOTALL)


# ---------------------------------------------------------------------------
# Node access
# ---------------------------------------------------------------------------


def node_text(node: Node) -> str:
    """Source text of a node exactly as written."""
    return node.text.decode("utf-8") if node.text is not None else ""


def named_children(node: Node) -> list[Node]:
    """Named children without comments."""
    return [child for child in node.named_children if child.type not in COMMENT_TYPES]


def call_name(call: Node) -> str:
    name = call.child_by_field_name("name")
    return node_text(name) if name is not None else ""


def call_arguments(call: Node) -> list[Node]:
    """Argument expressions of a method invocation or constructor call, in source order."""
    args = call.child_by_field_name("arguments")
    return named_children(args) if args is not None else []


def walk(node: Node, descend: Callable[[Node], bool] | None = None) -> Iterator[Node]:
    """Pre-order walk. Children of a node, the start node included, are skipped when ``descend(node)`` is false."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        if descend is not None and not descend(current):
            continue
        stack.extend(reversed(current.children))


def walk_post_order(node: Node) -> Iterator[Node]:
    """Post-order walk: every node is yielded after all of its descendants."""
    stack: list[tuple[Node, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if expanded:
            yield current
            continue
        stack.append((current, True))
        stack.extend((child, False) for child in reversed(current.children))


class TreeVisitor:
    """Depth-first visitor dispatching on ``node.type``.

    Subclasses define ``visit_<node_type>`` methods. A visit method decides
    whether to continue into children by calling ``generic_visit``, which
    schedules them; they are visited once the visit method returns, before
    any later sibling. Traversal keeps an explicit stack, so nesting depth
    is not bounded by the interpreter's recursion limit.
    """

    def visit(self, node: Node) -> None:
        pending = [node]
        while pending:
            current = pending.pop()
            self._scheduled: list[Node] = []
            visitor = getattr(self, f"visit_{current.type}", self.generic_visit)
            visitor(current)
            pending.extend(reversed(self._scheduled))

    def generic_visit(self, node: Node) -> None:
        self._scheduled.extend(node.children)


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------


def is_literal(node: Node) -> bool:
    return node.type in LITERAL_TYPES


def literal_value(node: Node) -> object | None:
    """Runtime value of a literal node; None for ``null``."""
    raw = node_text(node)
    if node.type == "string_literal":
        return decode_string_literal(raw)
    if node.type == "character_literal":
        return _unescape(raw[1:-1])
    if node.type == "true":
        return True
    if node.type == "false":
        return False
    if node.type in INTEGER_LITERAL_TYPES:
        return _integer_value(raw)
    if node.type in FLOAT_LITERAL_TYPES:
        return _float_value(raw)
    return None


def literal_string_value(node: Node) -> str | None:
    """Decoded content of a string literal or text block, else None."""
    if node.type != "string_literal":
        return None
    return decode_string_literal(node_text(node))


def java_string(value: object) -> str:
    """Render a literal value the way Java's ``toString`` does."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)


def decode_string_literal(raw: str) -> str:
    """Decode a Java string literal or text block, delimiters included."""
    if raw.startswith('"""'):
        return _unescape(_strip_text_block_indent(raw[3:-3]))
    return _unescape(raw[1:-1])


def _strip_text_block_indent(body: str) -> str:
    body = body.replace("\r\n", "\n").replace("\r", "\n")
    # content starts after the line terminator following the opening delimiter
    _, _, content = body.partition("\n")
    lines = content.split("\n")
    last = lines[-1]
    closing_on_own_line = not last.strip()

    significant = [line for line in lines[:-1] if line.strip()]
    significant.append(last)
    indent = min(len(line) - len(line.lstrip(" \t")) for line in significant)

    stripped = [line[indent:].rstrip(" \t") if line.strip() else "" for line in lines[:-1]]
    if closing_on_own_line:
        return "\n".join(stripped) + "\n" if stripped else ""
    stripped.append(last[indent:].rstrip(" \t"))
    return "\n".join(stripped)


def _unescape(text: str) -> str:
    def replace(match: re.Match[str]) -> str:
        escape = match.group(1)
        if escape == "\n":
            return ""
        if escape[0] == "u":
            return chr(int(escape.lstrip("u"), 16))
        if escape[0].isdigit():
            return chr(int(escape, 8))
        return _ESCAPES.get(escape, escape)

    return _ESCAPE_RE.sub(replace, text)


def _integer_value(raw: str) -> int:
    text = raw.replace("_", "").rstrip("lL")
    lowered = text.lower()
    if lowered.startswith("0x"):
        return int(text[2:], 16)
    if lowered.startswith("0b"):
        return int(text[2:], 2)
    if len(text) > 1 and text.startswith("0"):
        return int(text[1:], 8)
    return int(text)


def _float_value(raw: str) -> float:
    text = raw.replace("_", "")
    if text[-1] in "fFdD" and not text.lower().startswith("0x"):
        text = text[:-1]
    if text.lower().startswith("0x"):
        return float.fromhex(text.rstrip("fFdD"))
    return float(text)
