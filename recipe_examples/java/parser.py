"""Tree-sitter Java parsing.

Wraps the tree-sitter Java grammar behind a small parser object and
provides the conventional source path inference used for Java samples.

Usage::

    parser = JavaParser()
    unit = parser.parse_file(Path("src/test/java/org/example/FooTest.java"))
    unit.root  # tree-sitter root node
"""

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

import tree_sitter
import tree_sitter_java

from recipe_examples.exceptions import JavaParseError
from recipe_examples.java.tree import node_text
from recipe_examples.java.types import TypeResolver, top_level_types

JAVA_LANGUAGE = tree_sitter.Language(tree_sitter_java.language())


@dataclass(frozen=True)
class CompilationUnit:
    """A parsed Java source file."""

    source_path: Path
    source: bytes
    tree: tree_sitter.Tree

    @property
    def root(self) -> tree_sitter.Node:
        return self.tree.root_node

    @property
    def has_errors(self) -> bool:
        """True when tree-sitter had to recover from syntax errors."""
        return self.tree.root_node.has_error


class JavaParser:
    """Tree-sitter parser for Java sources.

    Syntax errors never raise: the grammar recovers with ERROR nodes and
    ``CompilationUnit.has_errors`` reports them. Only unreadable or
    undecodable files raise JavaParseError.
    """

    def __init__(self) -> None:
        self._parser = tree_sitter.Parser(JAVA_LANGUAGE)

    def parse(self, source: str | bytes, source_path: Path | None = None) -> CompilationUnit:
        if isinstance(source, str):
            source = source.encode("utf-8", errors="replace")
        tree = self._parser.parse(source)
        return CompilationUnit(
            source_path=source_path or source_path_from_tree(tree.root_node) or Path("file.java"),
            source=source,
            tree=tree,
        )

    def parse_file(self, path: Path) -> CompilationUnit:
        try:
            source = path.read_bytes()
            source.decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise JavaParseError(f"Cannot read Java source {path}: {e}") from e
        return self.parse(source, path)


def source_path_from_tree(root: tree_sitter.Node) -> Path | None:
    """Conventional path of a compilation unit: package directories plus the primary type's file name.

    The primary type is the public top-level type, or the first top-level
    type when none is public.
    """
    types = top_level_types(root)
    if not types:
        return None
    primary = next((t for t in types if _is_public(t)), types[0])
    name = primary.child_by_field_name("name")
    if name is None:
        return None
    package = TypeResolver.from_tree(root).package
    directory = PurePosixPath(*package.split(".")) if package else PurePosixPath()
    return Path(directory / f"{node_text(name)}.java")


def source_path_from_text(source: str) -> str | None:
    """Best-effort conventional path for Java source text.

    Returns None when the text does not parse cleanly or declares no
    top-level type.
    """
    tree = tree_sitter.Parser(JAVA_LANGUAGE).parse(source.encode("utf-8", errors="replace"))
    if tree.root_node.has_error:
        return None
    path = source_path_from_tree(tree.root_node)
    return path.as_posix() if path is not None else None


def _is_public(declaration: tree_sitter.Node) -> bool:
    modifiers = next((c for c in declaration.named_children if c.type == "modifiers"), None)
    return modifiers is not None and any(c.type == "public" for c in modifiers.children)
