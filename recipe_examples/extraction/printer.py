"""YAML rendering of collected recipe examples.

Output shape::

    type: specs.openrewrite.org/v1beta/example
    recipeName: org.example.MyRecipe
    examples:
      - description: "Adds a header"
        parameters:
          - value
        sources:
          - before: |
              class A {}
            after: |
              // header
              class A {}
            path: A.java
            language: java
"""

import sys
from collections.abc import Sequence
from io import StringIO

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.scalarstring import DoubleQuotedScalarString, LiteralScalarString

from recipe_examples.extraction.model import Example, RecipeNameAndParameters, Source, has_text


def render_examples_yaml(
    recipe_type: str,
    recipe: RecipeNameAndParameters | None,
    examples: Sequence[Example],
    using_default_recipe: bool,
) -> str:
    """Render one YAML document for a recipe and its examples.

    Args:
        recipe_type: Value of the top-level ``type`` key.
        recipe: The authoritative recipe.
        examples: Examples in traversal order.
        using_default_recipe: When true every example renders the recipe's own
            parameters instead of the ones captured with the example.

    Returns:
        The YAML text, or "" when the recipe has no name or there are no
        examples. Callers skip writing in that case.
    """
    if recipe is None or not recipe.is_valid or not examples:
        return ""

    document = CommentedMap()
    document["type"] = recipe_type
    document["recipeName"] = recipe.name
    document["examples"] = CommentedSeq(
        _example_data(example, recipe.parameters if using_default_recipe else example.parameters) for example in examples
    )

    stream = StringIO()
    _yaml().dump(document, stream)
    return stream.getvalue()


def _yaml() -> YAML:
    yaml = YAML()
    yaml.indent(mapping=2, sequence=4, offset=2)
    yaml.width = sys.maxsize
    yaml.allow_unicode = True
    return yaml


def _example_data(example: Example, parameters: Sequence[str]) -> CommentedMap:
    data = CommentedMap()
    data["description"] = DoubleQuotedScalarString(example.description)
    if parameters:
        data["parameters"] = CommentedSeq(parameters)
    data["sources"] = CommentedSeq(_source_data(source) for source in example.sources)
    return data


def _source_data(source: Source) -> CommentedMap:
    data = CommentedMap()
    if has_text(source.before):
        data["before"] = _text_block(source.before)
    if has_text(source.after):
        data["after"] = _text_block(source.after)
    if source.path:
        data["path"] = source.path.replace("\\", "/")
    if source.language:
        data["language"] = source.language
    return data


def _text_block(text: str) -> str:
    """Literal block for multi-line text, plain scalar otherwise.

    Trailing whitespace on a line would force the emitter into a quoted
    style, so it is dropped along with surplus trailing line breaks.
    """
    if "\n" not in text:
        return text
    lines = [line.rstrip() for line in text.split("\n")]
    return LiteralScalarString("\n".join(lines).rstrip("\n") + "\n")
