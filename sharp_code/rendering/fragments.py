"""
Layout of caller-supplied C# fragments.

Accessor bodies are given as free text, e.g. ``"{ if (value < 0) { return; } _age = value; }"``.
They are parsed with tree-sitter and laid out with braces on their own lines,
one statement per line and 4-space indentation. Expressions and default
values are spliced in as written.
"""

from __future__ import annotations

import logging
from functools import lru_cache

import tree_sitter_c_sharp as ts_csharp
from tree_sitter import Language, Node, Parser

logger = logging.getLogger(__name__)

INDENT = "    "

# A block body is only valid C# inside a member, so it is parsed inside this wrapper
_WRAPPER_PREFIX = "class __Fragment { void __Body() "
_WRAPPER_SUFFIX = " }"


@lru_cache(maxsize=1)
def csharp_parser() -> Parser:
    """Return the shared tree-sitter parser for C#."""
    return Parser(Language(ts_csharp.language()))


def collapse(text: str) -> str:
    """Join the lines of `text` into a single line."""
    return " ".join(line.strip() for line in text.splitlines() if line.strip())


class FragmentParser:
    """Parses and lays out accessor bodies, expressions and default values."""

    def __init__(self, parser: Parser | None = None):
        self._parser = parser or csharp_parser()

    def format_expression(self, expression: str) -> str:
        """Return an expression body without surrounding whitespace or a trailing ``;``."""
        return collapse(expression).removesuffix(";").rstrip()

    def format_default_value(self, value: str) -> str:
        """Return a property initializer without a leading ``=`` or a trailing ``;``."""
        value = collapse(value)
        if value.startswith("="):
            value = value[1:].lstrip()
        return value.removesuffix(";").rstrip()

    def format_block(self, body: str) -> list[str]:
        """
        Lay out a block body.

        Args:
            body: Block statement, including its outer braces

        Returns:
            The lines of the block, starting with ``{`` and ending with ``}``
        """
        source = bytes(_WRAPPER_PREFIX + body.strip() + _WRAPPER_SUFFIX, "utf8")
        tree = self._parser.parse(source)
        block = self._find_block(tree.root_node)

        if tree.root_node.has_error or block is None:
            logger.warning("Could not parse block body, emitting it on a single line: %s", collapse(body))
            inner = body.strip().removeprefix("{").removesuffix("}").strip()
            return ["{", INDENT + collapse(inner), "}"] if inner else ["{", "}"]

        return self._format_block(block, source)

    def _find_block(self, node: Node) -> Node | None:
        if node.type == "block":
            return node
        for child in node.children:
            found = self._find_block(child)
            if found is not None:
                return found
        return None

    def _format_block(self, block: Node, source: bytes) -> list[str]:
        lines = ["{"]
        for statement in block.named_children:
            lines.extend(INDENT + line for line in self._format_statement(statement, source))
        lines.append("}")
        return lines

    def _format_statement(self, node: Node, source: bytes) -> list[str]:
        """
        Lay out one statement.

        Statements without nested blocks are printed on one line. Otherwise the
        text in between blocks (``if (x)``, ``else``, ``catch (E e)``) is put on
        its own line and the blocks are laid out below it.
        """
        if not self._has_nested_block(node):
            return [collapse(self._text(node, source))]

        lines: list[str] = []
        pending: list[Node] = []

        def pending_text() -> str:
            text = collapse(source[pending[0].start_byte : pending[-1].end_byte].decode("utf8"))
            pending.clear()
            return text

        for child in node.children:
            if child.type == "block":
                if pending:
                    lines.append(pending_text())
                lines.extend(self._format_block(child, source))
            elif self._is_statement(child) and self._has_nested_block(child):
                nested = self._format_statement(child, source)
                if pending:
                    # else if (...)
                    nested[0] = f"{pending_text()} {nested[0]}"
                lines.extend(nested)
            else:
                pending.append(child)

        if pending:
            lines.append(pending_text())
        return lines

    def _has_nested_block(self, node: Node) -> bool:
        return any(child.type == "block" or (self._is_statement(child) and self._has_nested_block(child)) for child in node.children)

    @staticmethod
    def _is_statement(node: Node) -> bool:
        return node.type.endswith("_statement") or node.type in ("catch_clause", "finally_clause")

    @staticmethod
    def _text(node: Node, source: bytes) -> str:
        return source[node.start_byte : node.end_byte].decode("utf8")
