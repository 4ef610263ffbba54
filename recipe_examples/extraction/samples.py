"""Before/after sample extraction from ``rewriteRun`` arguments.

Each source spec argument is matched against an ordered table of sample
call shapes. The first matching entry fixes the language tag and, for build
descriptors, a conventional file name. Adding a sample language means adding
a table entry.
"""

from collections.abc import Callable
from dataclasses import dataclass

from tree_sitter import Node

from recipe_examples.extraction.matchers import PATH_METHOD, MethodMatcher
from recipe_examples.extraction.model import Source
from recipe_examples.java.parser import source_path_from_text
from recipe_examples.java.tree import call_arguments, is_literal, literal_string_value, walk_post_order
from recipe_examples.java.types import TypeResolver
from recipe_examples.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SampleShape:
    """A recognized sample call: its matcher, language tag and optional forced file name."""

    matcher: MethodMatcher
    language: str
    default_path: str | None = None


SAMPLE_SHAPES: tuple[SampleShape, ...] = (
    SampleShape(MethodMatcher("org.openrewrite.gradle.Assertions", "buildGradle"), "groovy", "build.gradle"),
    SampleShape(MethodMatcher("org.openrewrite.maven.Assertions", "pomXml"), "xml", "pom.xml"),
    SampleShape(MethodMatcher("org.openrewrite.java.Assertions", "java"), "java"),
    SampleShape(MethodMatcher("org.openrewrite.kotlin.Assertions", "kotlin"), "kotlin"),
    SampleShape(MethodMatcher("org.openrewrite.groovy.Assertions", "groovy"), "groovy"),
    SampleShape(MethodMatcher("org.openrewrite.xml.Assertions", "xml"), "xml"),
    SampleShape(MethodMatcher("org.openrewrite.yaml.Assertions", "yaml"), "yaml"),
    SampleShape(MethodMatcher("org.openrewrite.json.Assertions", "json"), "json"),
    SampleShape(MethodMatcher("org.openrewrite.properties.Assertions", "properties"), "properties"),
    SampleShape(MethodMatcher("org.openrewrite.hcl.Assertions", "hcl"), "hcl"),
    SampleShape(MethodMatcher("org.openrewrite.toml.Assertions", "toml"), "toml"),
    SampleShape(MethodMatcher("org.openrewrite.protobuf.Assertions", "protobuf"), "protobuf"),
    SampleShape(MethodMatcher("org.openrewrite.test.SourceSpecs", "text"), "text"),
)

# Languages whose conventional path follows from their top-level declarations
PATH_INFERENCE: dict[str, Callable[[str], str | None]] = {
    "java": source_path_from_text,
}


def match_sample_shape(call: Node, resolver: TypeResolver) -> SampleShape | None:
    """First table entry matching the call, if any."""
    return next((shape for shape in SAMPLE_SHAPES if shape.matcher.matches(call, resolver)), None)


def extract_source(argument: Node, resolver: TypeResolver) -> Source | None:
    """Extract the before/after sample declared by one ``rewriteRun`` argument.

    Calls inside the argument are visited in post-order, so a ``path(...)``
    nested in a sample call's own spec callback is seen before the sample
    call itself. When several sample calls appear, the last one wins.

    Returns:
        The sample, or None when the argument contributes neither before
        nor after text.
    """
    shape: SampleShape | None = None
    before: str | None = None
    after: str | None = None
    explicit_path: str | None = None

    for node in walk_post_order(argument):
        if node.type != "method_invocation":
            continue
        if PATH_METHOD.matches(node, resolver):
            explicit_path = literal_string_value(call_arguments(node)[0]) or explicit_path
            continue
        matched = match_sample_shape(node, resolver)
        if matched is not None:
            shape = matched
            before, after = _before_after(call_arguments(node))

    if shape is None:
        return None

    path = explicit_path or shape.default_path
    if path is None and before is not None and (infer := PATH_INFERENCE.get(shape.language)) is not None:
        path = infer(before)
        if path is None:
            logger.debug("No conventional path for %s sample", shape.language)

    source = Source(before=before, after=after, path=path, language=shape.language)
    return None if source.is_empty else source


def _before_after(arguments: list[Node]) -> tuple[str | None, str | None]:
    """arg0 is always before; arg1, when a literal with a value, is after."""
    before = literal_string_value(arguments[0]) if arguments else None
    after = None
    if len(arguments) > 1 and is_literal(arguments[1]):
        after = literal_string_value(arguments[1])
    return before, after
