"""Java source parsing on top of the tree-sitter Java grammar.

Provides the parsed compilation unit, node and literal helpers, and
import-based type name resolution used by example extraction.
"""

from recipe_examples.java.parser import (
    JAVA_LANGUAGE,
    CompilationUnit,
    JavaParser,
    source_path_from_text,
    source_path_from_tree,
)
from recipe_examples.java.tree import (
    TreeVisitor,
    call_arguments,
    call_name,
    decode_string_literal,
    is_literal,
    java_string,
    literal_string_value,
    literal_value,
    node_text,
    walk,
    walk_post_order,
)
from recipe_examples.java.types import TypeResolver, top_level_types

__all__ = [
    "JAVA_LANGUAGE",
    "CompilationUnit",
    "JavaParser",
    "TreeVisitor",
    "TypeResolver",
    "call_arguments",
    "call_name",
    "decode_string_literal",
    "is_literal",
    "java_string",
    "literal_string_value",
    "literal_value",
    "node_text",
    "source_path_from_text",
    "source_path_from_tree",
    "top_level_types",
    "walk",
    "walk_post_order",
]
