"""Shared helpers for tests over tree-sitter Java trees."""

from pathlib import Path

from tree_sitter import Node

from recipe_examples.extraction.extractor import ExamplesExtractor
from recipe_examples.java.parser import JavaParser
from recipe_examples.java.tree import call_name, walk


def first_node(node: Node, node_type: str) -> Node | None:
    """First node of ``node_type`` in pre-order, or None."""
    return next((n for n in walk(node) if n.type == node_type), None)


def all_nodes(node: Node, node_type: str) -> list[Node]:
    """Every node of ``node_type`` in pre-order."""
    return [n for n in walk(node) if n.type == node_type]


def find_call(node: Node, name: str) -> Node:
    """First method invocation named ``name``."""
    for call in all_nodes(node, "method_invocation"):
        if call_name(call) == name:
            return call
    raise AssertionError(f"no call to {name}")


def extract(source: str) -> ExamplesExtractor:
    """Run a fresh extractor over Java source text."""
    extractor = ExamplesExtractor()
    extractor.extract(JavaParser().parse(source))
    return extractor


def write_java(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
