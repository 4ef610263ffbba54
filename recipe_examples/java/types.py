"""Import-based type name resolution for a single compilation unit.

Tree-sitter trees carry no type attribution, so type questions are answered
from what the compilation unit itself declares: its package, its imports
and the types it declares.
"""

from dataclasses import dataclass, field

from tree_sitter import Node

from recipe_examples.java.tree import named_children, node_text

TYPE_DECLARATION_TYPES = frozenset({
    "class_declaration",
    "interface_declaration",
    "enum_declaration",
    "record_declaration",
    "annotation_type_declaration",
})

# Implicitly imported java.lang types that commonly appear in test sources
JAVA_LANG_TYPES = frozenset({
    "Boolean",
    "Byte",
    "Character",
    "Class",
    "Double",
    "Enum",
    "Error",
    "Exception",
    "Float",
    "IllegalArgumentException",
    "IllegalStateException",
    "Integer",
    "Iterable",
    "Long",
    "Math",
    "Number",
    "Object",
    "Override",
    "Record",
    "Runnable",
    "RuntimeException",
    "Short",
    "String",
    "StringBuffer",
    "StringBuilder",
    "System",
    "Thread",
    "Throwable",
    "UnsupportedOperationException",
    "Void",
})


@dataclass
class TypeResolver:
    """Mutable during construction, used read-only afterwards.

    Attributes:
        package: Package of the compilation unit ("" for the default package).
        imports: Simple name -> fully-qualified name for single-type imports.
        on_demand_packages: Packages imported with ``.*``.
        static_members: Member name -> declaring type for single static imports.
        static_on_demand: Types whose members are imported with ``static ... .*``.
        declared: Simple name -> fully-qualified name of types declared in the unit.
        declared_supertypes: Fully-qualified name -> written superclass name.
    """

    package: str = ""
    imports: dict[str, str] = field(default_factory=dict)
    on_demand_packages: list[str] = field(default_factory=list)
    static_members: dict[str, str] = field(default_factory=dict)
    static_on_demand: list[str] = field(default_factory=list)
    declared: dict[str, str] = field(default_factory=dict)
    declared_supertypes: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_tree(cls, root: Node) -> "TypeResolver":
        resolver = cls()
        for child in named_children(root):
            if child.type == "package_declaration":
                names = [c for c in named_children(child) if c.type in ("identifier", "scoped_identifier")]
                if names:
                    resolver.package = node_text(names[0])
            elif child.type == "import_declaration":
                resolver._add_import(child)
        resolver._collect_declarations(root)
        return resolver

    def _add_import(self, node: Node) -> None:
        is_static = any(c.type == "static" for c in node.children)
        is_on_demand = any(c.type == "asterisk" for c in node.children)
        names = [c for c in named_children(node) if c.type in ("identifier", "scoped_identifier")]
        if not names:
            return
        name = node_text(names[0])
        if is_static and is_on_demand:
            self.static_on_demand.append(name)
        elif is_static:
            owner, _, member = name.rpartition(".")
            self.static_members[member] = owner
        elif is_on_demand:
            self.on_demand_packages.append(name)
        else:
            self.imports[name.rpartition(".")[2]] = name

    def _collect_declarations(self, root: Node) -> None:
        prefix = f"{self.package}." if self.package else ""

        def collect(node: Node, outer: str | None) -> None:
            for child in named_children(node):
                if child.type in TYPE_DECLARATION_TYPES:
                    name_node = child.child_by_field_name("name")
                    if name_node is None:
                        continue
                    simple = node_text(name_node)
                    fqn = f"{outer}${simple}" if outer else f"{prefix}{simple}"
                    self.declared.setdefault(simple, fqn)
                    superclass = child.child_by_field_name("superclass")
                    if superclass is not None:
                        supertypes = named_children(superclass)
                        if supertypes:
                            self.declared_supertypes[fqn] = node_text(supertypes[0])
                    body = child.child_by_field_name("body")
                    if body is not None:
                        collect(body, fqn)
                elif child.type in ("class_body", "interface_body", "enum_body", "enum_body_declarations"):
                    collect(child, outer)

        collect(root, None)

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    def resolve(self, name: str) -> str:
        """Fully-qualified name for a type name as written in the source."""
        name = _erase(name)
        first, dot, rest = name.partition(".")
        if dot:
            if first in self.declared or first in self.imports:
                return self.resolve(first) + "$" + rest.replace(".", "$")
            return name
        if name in self.declared:
            return self.declared[name]
        if name in self.imports:
            return self.imports[name]
        if name in JAVA_LANG_TYPES:
            return f"java.lang.{name}"
        return f"{self.package}.{name}" if self.package else name

    def could_be(self, name: str, fqn: str) -> bool:
        """Whether a written type name can denote the fully-qualified type ``fqn``."""
        name = _erase(name)
        if name == fqn:
            return True
        package, _, simple = fqn.rpartition(".")
        if name != simple:
            return False
        if name in self.declared:
            return self.declared[name] == fqn
        if name in self.imports:
            return self.imports[name] == fqn
        return package in self.on_demand_packages or package == self.package or package == "java.lang"

    def is_static_member_of(self, member: str, fqn: str) -> bool:
        """Whether an unqualified call to ``member`` can be a static import from ``fqn``."""
        if member in self.static_members:
            return self.static_members[member] == fqn
        return fqn in self.static_on_demand

    def superclass_of(self, fqn: str) -> str | None:
        written = self.declared_supertypes.get(fqn)
        return self.resolve(written) if written else None


def _erase(name: str) -> str:
    """Drop type arguments, annotations and whitespace from a written type name."""
    name = name.split("<", 1)[0]
    return "".join(part for part in name.split() if not part.startswith("@"))


def top_level_types(root: Node) -> list[Node]:
    """Top-level type declarations of a compilation unit, in source order."""
    return [child for child in named_children(root) if child.type in TYPE_DECLARATION_TYPES]

