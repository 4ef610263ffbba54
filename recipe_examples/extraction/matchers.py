"""Declarative matchers for annotation, declaration and call shapes in recipe tests."""

from dataclasses import dataclass

from tree_sitter import Node

from recipe_examples.java.tree import call_arguments, call_name, named_children, node_text
from recipe_examples.java.types import TypeResolver

RECIPE_SPEC_TYPE = "org.openrewrite.test.RecipeSpec"

# Constructed types under these namespaces are never recipes
NON_RECIPE_NAMESPACES: tuple[str, ...] = (
    "java.",
    "javax.",
    "jdk.",
    "sun.",
    "kotlin.",
    "org.openrewrite.test.",
    "org.openrewrite.config.",
)

# Framework types outside those namespaces that recipe tests commonly construct
NON_RECIPE_TYPES = frozenset({
    "org.openrewrite.ExecutionContext",
    "org.openrewrite.InMemoryExecutionContext",
    "org.openrewrite.DelegatingExecutionContext",
})

CALLBACK_TYPES = frozenset({"lambda_expression", "method_reference"})


@dataclass(frozen=True)
class AnnotationMatcher:
    """Matches ``@Name`` or ``@Name(...)`` where the name can denote ``annotation_type``."""

    annotation_type: str

    def matches(self, annotation: Node, resolver: TypeResolver) -> bool:
        if annotation.type not in ("annotation", "marker_annotation"):
            return False
        name = annotation.child_by_field_name("name")
        return name is not None and resolver.could_be(node_text(name), self.annotation_type)


@dataclass(frozen=True)
class MethodMatcher:
    """Matches a method invocation by simple name, arity and, when given, declaring type.

    Without a declaring type any receiver is accepted. With one, an
    unqualified call must be statically imported from that type and a
    qualified call must be made on a type name that can denote it.
    """

    declaring_type: str | None
    name: str
    arity: int | None = None

    def matches(self, call: Node, resolver: TypeResolver) -> bool:
        if call.type != "method_invocation" or call_name(call) != self.name:
            return False
        if self.arity is not None and len(call_arguments(call)) != self.arity:
            return False
        if self.declaring_type is None:
            return True
        receiver = call.child_by_field_name("object")
        if receiver is None:
            return resolver.is_static_member_of(self.name, self.declaring_type)
        if receiver.type in ("identifier", "field_access", "scoped_identifier"):
            return resolver.could_be(node_text(receiver), self.declaring_type)
        return False


@dataclass(frozen=True)
class MethodDeclarationMatcher:
    """Matches a method declaration by name and parameter types (an override signature)."""

    name: str
    parameter_types: tuple[str, ...]

    def matches(self, method: Node, resolver: TypeResolver) -> bool:
        name = method.child_by_field_name("name")
        if name is None or node_text(name) != self.name:
            return False
        parameters = formal_parameters(method)
        if len(parameters) != len(self.parameter_types):
            return False
        for parameter, expected in zip(parameters, self.parameter_types):
            type_node = parameter.child_by_field_name("type")
            if type_node is None or not resolver.could_be(node_text(type_node), expected):
                return False
        return True


TEST_ANNOTATION = AnnotationMatcher("org.junit.jupiter.api.Test")
DOCUMENT_EXAMPLE_ANNOTATION = AnnotationMatcher("org.openrewrite.DocumentExample")

DEFAULTS_METHOD = MethodDeclarationMatcher("defaults", (RECIPE_SPEC_TYPE,))
REWRITE_RUN_METHOD = MethodMatcher(None, "rewriteRun")

RECIPE_METHOD = MethodMatcher(None, "recipe", arity=1)
RECIPE_FROM_RESOURCES_METHOD = MethodMatcher(None, "recipeFromResources", arity=1)
ACTIVATE_RECIPES_METHOD = MethodMatcher(None, "activateRecipes", arity=1)
PATH_METHOD = MethodMatcher(None, "path", arity=1)


# ---------------------------------------------------------------------------
# Structural helpers
# ---------------------------------------------------------------------------


def annotations(declaration: Node) -> list[Node]:
    """Leading annotations of a declaration."""
    modifiers = next((c for c in declaration.named_children if c.type == "modifiers"), None)
    if modifiers is None:
        return []
    return [c for c in modifiers.named_children if c.type in ("annotation", "marker_annotation")]


def has_annotation(declaration: Node, matcher: AnnotationMatcher, resolver: TypeResolver) -> bool:
    return any(matcher.matches(a, resolver) for a in annotations(declaration))


def formal_parameters(method: Node) -> list[Node]:
    parameters = method.child_by_field_name("parameters")
    if parameters is None:
        return []
    return [p for p in named_children(parameters) if p.type in ("formal_parameter", "spread_parameter")]


def parameter_name(parameter: Node) -> str | None:
    name = parameter.child_by_field_name("name")
    if name is None:
        # spread parameters nest the name inside a variable declarator
        declarator = next((c for c in parameter.named_children if c.type == "variable_declarator"), None)
        name = declarator.child_by_field_name("name") if declarator is not None else None
    return node_text(name) if name is not None else None


def callback_parameter_names(callback: Node) -> set[str]:
    """Names bound by a lambda's parameter list."""
    if callback.type != "lambda_expression":
        return set()
    parameters = callback.child_by_field_name("parameters")
    if parameters is None:
        return set()
    if parameters.type == "identifier":
        return {node_text(parameters)}
    names: set[str] = set()
    for child in named_children(parameters):
        if child.type == "identifier":
            names.add(node_text(child))
        elif (name := parameter_name(child)) is not None:
            names.add(name)
    return names


def is_callback(argument: Node) -> bool:
    return argument.type in CALLBACK_TYPES


def receiver_root(call: Node) -> str | None:
    """Identifier at the root of a call chain such as ``spec.parser(p).recipe(r)``."""
    receiver = call.child_by_field_name("object")
    while receiver is not None and receiver.type == "method_invocation":
        receiver = receiver.child_by_field_name("object")
    if receiver is not None and receiver.type == "identifier":
        return node_text(receiver)
    return None


def is_recipe_type(fqn: str, resolver: TypeResolver) -> bool:
    """Approximate assignability to the recipe type.

    Types declared in the compilation unit are judged by the furthest known
    superclass in their chain; all other types by their namespace.
    """
    seen: set[str] = set()
    current = fqn
    while current not in seen and (superclass := resolver.superclass_of(current)) is not None:
        seen.add(current)
        current = superclass
    if fqn in NON_RECIPE_TYPES or current in NON_RECIPE_TYPES:
        return False
    return not current.startswith(NON_RECIPE_NAMESPACES) and not fqn.startswith(NON_RECIPE_NAMESPACES)
