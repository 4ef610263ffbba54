"""Example extraction from recipe test compilation units.

ExamplesExtractor walks one parsed test file, finds the documented tests,
resolves the recipe under test and collects the before/after samples passed
to ``rewriteRun``. Each instance serves exactly one file.
"""

from pathlib import Path

from tree_sitter import Node

from recipe_examples.exceptions import ExtractorReuseError
from recipe_examples.extraction.matchers import (
    DEFAULTS_METHOD,
    DOCUMENT_EXAMPLE_ANNOTATION,
    REWRITE_RUN_METHOD,
    TEST_ANNOTATION,
    annotations,
    callback_parameter_names,
    formal_parameters,
    has_annotation,
    is_callback,
    parameter_name,
)
from recipe_examples.extraction.model import Example, RecipeNameAndParameters, Source
from recipe_examples.extraction.printer import render_examples_yaml
from recipe_examples.extraction.recipes import find_recipe
from recipe_examples.extraction.samples import extract_source
from recipe_examples.java.parser import CompilationUnit, JavaParser
from recipe_examples.java.tree import TreeVisitor, call_arguments, literal_string_value, named_children, node_text
from recipe_examples.java.types import TypeResolver
from recipe_examples.logging import get_logger
from recipe_examples.settings import settings

logger = get_logger(__name__)


class ExamplesExtractor(TreeVisitor):
    """Collects documented examples from one recipe test file.

    State accumulates over a single traversal: the default recipe from a
    ``defaults(RecipeSpec)`` override, the most recently specified inline
    recipe, the pending description and the examples in traversal order.

    Example:
        >>> extractor = ExamplesExtractor()
        >>> extractor.extract(JavaParser().parse_file(path))
        >>> yaml_text = extractor.print_yaml()
    """

    def __init__(self, recipe_type: str | None = None):
        self.recipe_type = recipe_type or settings.example_type
        self.default_recipe: RecipeNameAndParameters | None = None
        self.specified_recipe: RecipeNameAndParameters | None = None
        self.examples: list[Example] = []
        self._description = ""
        self._resolver: TypeResolver | None = None

    def extract(self, unit: CompilationUnit) -> list[Example]:
        """Traverse a compilation unit and return the collected examples.

        Raises:
            ExtractorReuseError: If this extractor already traversed a unit.
        """
        if self._resolver is not None:
            raise ExtractorReuseError("ExamplesExtractor instances are single-use; create one per file")
        self._resolver = TypeResolver.from_tree(unit.root)
        if unit.has_errors:
            logger.debug("Extracting from %s despite syntax errors", unit.source_path)
        self.visit(unit.root)
        logger.debug("Collected %d example(s) from %s", len(self.examples), unit.source_path)
        return self.examples

    @property
    def using_default_recipe(self) -> bool:
        return self.specified_recipe is None or not self.specified_recipe.is_valid

    @property
    def recipe(self) -> RecipeNameAndParameters | None:
        """The authoritative recipe: the specified one when valid, else the default."""
        return self.default_recipe if self.using_default_recipe else self.specified_recipe

    def print_yaml(self) -> str:
        """Rendered YAML for the collected examples, "" when there is nothing to write."""
        return render_examples_yaml(self.recipe_type, self.recipe, self.examples, self.using_default_recipe)

    # -----------------------------------------------------------------------
    # Visitor
    # -----------------------------------------------------------------------

    def visit_method_declaration(self, method: Node) -> None:
        resolver = self._require_resolver()
        if DEFAULTS_METHOD.matches(method, resolver):
            names = {name for p in formal_parameters(method) if (name := parameter_name(p)) is not None}
            self.default_recipe = find_recipe(method, names, resolver)
            logger.debug("Default recipe: %s", self.default_recipe)
            return

        if not has_annotation(method, TEST_ANNOTATION, resolver) or not has_annotation(
            method, DOCUMENT_EXAMPLE_ANNOTATION, resolver
        ):
            return

        self._description = ""
        for annotation in annotations(method):
            if DOCUMENT_EXAMPLE_ANNOTATION.matches(annotation, resolver):
                description = _annotation_description(annotation)
                if description is not None:
                    self._description = description
        self.generic_visit(method)

    def visit_constructor_declaration(self, constructor: Node) -> None:
        # constructors are never tests
        return

    def visit_method_invocation(self, call: Node) -> None:
        resolver = self._require_resolver()
        if not REWRITE_RUN_METHOD.matches(call, resolver):
            return

        arguments = call_arguments(call)
        recipe: RecipeNameAndParameters | None = None
        samples = arguments
        if arguments and is_callback(arguments[0]):
            callback, samples = arguments[0], arguments[1:]
            recipe = find_recipe(callback, callback_parameter_names(callback), resolver)
            if recipe is not None:
                self.specified_recipe = recipe
                logger.debug("Specified recipe: %s", recipe)

        sources: list[Source] = []
        for argument in samples:
            source = extract_source(argument, resolver)
            if source is not None:
                sources.append(source)
        if not sources:
            return

        if recipe is not None:
            parameters = recipe.parameters
        elif self.default_recipe is not None:
            parameters = self.default_recipe.parameters
        else:
            parameters = ()
        self.examples.append(Example(description=self._description, parameters=parameters, sources=tuple(sources)))

    def _require_resolver(self) -> TypeResolver:
        if self._resolver is None:
            raise RuntimeError("visit() called outside extract()")
        return self._resolver


def _annotation_description(annotation: Node) -> str | None:
    """Description given as ``@DocumentExample("...")`` or ``@DocumentExample(value = "...")``."""
    arguments = annotation.child_by_field_name("arguments")
    if arguments is None:
        return None
    elements = named_children(arguments)
    if len(elements) != 1:
        return None
    element = elements[0]
    if element.type == "element_value_pair":
        key = element.child_by_field_name("key")
        if key is None or node_text(key) != "value":
            return None
        value = element.child_by_field_name("value")
        return literal_string_value(value) if value is not None else None
    return literal_string_value(element)


def extract_examples(source: str | bytes, source_path: Path | None = None, recipe_type: str | None = None) -> str:
    """Parse Java test source and return its examples YAML ("" when there is none)."""
    extractor = ExamplesExtractor(recipe_type)
    extractor.extract(JavaParser().parse(source, source_path))
    return extractor.print_yaml()
