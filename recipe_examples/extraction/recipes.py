"""Recipe identity resolution.

Finds the recipe a test configures, either in the ``defaults`` override or
in the configuration callback passed to ``rewriteRun``. Two declaration
forms are recognized inside ``recipe(...)``: a constructor call of a recipe
type and a catalog activation naming a recipe by fully-qualified name.
"""

from tree_sitter import Node

from recipe_examples.extraction.matchers import (
    ACTIVATE_RECIPES_METHOD,
    RECIPE_FROM_RESOURCES_METHOD,
    RECIPE_METHOD,
    is_recipe_type,
    receiver_root,
)
from recipe_examples.extraction.model import RecipeNameAndParameters
from recipe_examples.java.tree import (
    call_arguments,
    call_name,
    is_literal,
    java_string,
    literal_string_value,
    literal_value,
    node_text,
    walk,
    walk_post_order,
)
from recipe_examples.java.types import TypeResolver


def find_recipe(scope: Node, spec_names: set[str], resolver: TypeResolver) -> RecipeNameAndParameters | None:
    """Resolve the recipe configured within ``scope``.

    Args:
        scope: The configuration callback or the ``defaults`` method.
        spec_names: Identifiers bound to the recipe spec inside ``scope``.
        resolver: Type resolution for the enclosing compilation unit.

    Returns:
        The last constructor-declared recipe if any, else the last catalog
        activation, else None.
    """
    constructed: RecipeNameAndParameters | None = None
    activated: RecipeNameAndParameters | None = None

    # post-order visits chained calls such as spec.recipe(a).recipe(b) in source order
    for call in walk_post_order(scope):
        if call.type != "method_invocation" or receiver_root(call) not in spec_names:
            continue
        if RECIPE_FROM_RESOURCES_METHOD.matches(call, resolver):
            activated = _activated_recipe(call) or activated
        elif RECIPE_METHOD.matches(call, resolver):
            for declaration in _declarations(call_arguments(call)[0], scope):
                for node in walk(declaration, descend=_descend):
                    if node.type == "object_creation_expression":
                        constructed = _constructed_recipe(node, resolver) or constructed
                    elif ACTIVATE_RECIPES_METHOD.matches(node, resolver):
                        activated = _activated_recipe(node) or activated

    return constructed or activated


def extract_parameters(arguments: list[Node]) -> tuple[str, ...]:
    """Positional constructor arguments rendered as text.

    Literals contribute their value's string form, ``null`` its source text,
    any other expression its source text.
    """
    parameters: list[str] = []
    for argument in arguments:
        if is_literal(argument):
            value = literal_value(argument)
            parameters.append(java_string(value) if value is not None else node_text(argument))
        else:
            parameters.append(node_text(argument))
    return tuple(parameters)


def _declarations(argument: Node, scope: Node) -> list[Node]:
    """Expressions that may declare the recipe passed as ``argument``.

    An identifier is followed to the last initializer of a local variable
    with that name declared before it.
    """
    if argument.type != "identifier":
        return [argument]
    name = node_text(argument)
    initializers = [
        value
        for node in walk(scope)
        if node.type == "variable_declarator"
        and node.end_byte <= argument.start_byte
        and (declared := node.child_by_field_name("name")) is not None
        and node_text(declared) == name
        and (value := node.child_by_field_name("value")) is not None
    ]
    return initializers[-1:]


def _descend(node: Node) -> bool:
    # an activation's receiver chain and arguments configure the catalog, not the recipe
    if node.type == "method_invocation" and call_name(node) == ACTIVATE_RECIPES_METHOD.name:
        return False
    return node.type not in ("object_creation_expression", "lambda_expression")


def _constructed_recipe(creation: Node, resolver: TypeResolver) -> RecipeNameAndParameters | None:
    if any(child.type == "class_body" for child in creation.named_children):
        return None
    type_node = creation.child_by_field_name("type")
    if type_node is None:
        return None
    fqn = resolver.resolve(node_text(type_node))
    if not is_recipe_type(fqn, resolver):
        return None
    return RecipeNameAndParameters(name=fqn, parameters=extract_parameters(call_arguments(creation)))


def _activated_recipe(call: Node) -> RecipeNameAndParameters | None:
    name = literal_string_value(call_arguments(call)[0])
    return RecipeNameAndParameters(name=name) if name else None
