"""Recipe Examples - documentation examples extracted from OpenRewrite recipe tests.

Recipe test classes demonstrate a recipe with ``rewriteRun(...)`` calls that
pair source text before and after the recipe runs. This package parses those
Java test files with tree-sitter, collects the samples of every
``@Test @DocumentExample`` method and renders them as YAML documents of type
``specs.openrewrite.org/v1beta/example``.

Quick Start:
    >>> from pathlib import Path
    >>> from recipe_examples import ExamplesExtractor, JavaParser
    >>>
    >>> extractor = ExamplesExtractor()
    >>> extractor.extract(JavaParser().parse_file(Path("src/test/java/org/example/MyRecipeTest.java")))
    >>> print(extractor.print_yaml())

    Or for a whole source set:

    >>> from recipe_examples import generate_examples
    >>> report = generate_examples(Path("src/test/java"), Path("build/rewrite/examples"))

Environment Variables:
    - RECIPE_EXAMPLES_OUTPUT_DIR: Default output root for the CLI
    - RECIPE_EXAMPLES_OVERWRITE: Replace existing YAML files
    - RECIPE_EXAMPLES_LOG_LEVEL: Log level of every ``recipe_examples`` component
    - RECIPE_EXAMPLES_LOGGING_CONFIG: Path to a YAML logging configuration
"""

from .exceptions import ExtractorReuseError, JavaParseError, RecipeExamplesError
from .extraction import (
    Example,
    ExamplesExtractor,
    RecipeNameAndParameters,
    Source,
    extract_examples,
    render_examples_yaml,
)
from .generator import GenerationReport, generate_examples
from .java import CompilationUnit, JavaParser
from .logging import get_logger, setup_logging
from .settings import Settings, settings

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Parsing
    "CompilationUnit",
    "JavaParser",
    # Extraction
    "Example",
    "ExamplesExtractor",
    "RecipeNameAndParameters",
    "Source",
    "extract_examples",
    "render_examples_yaml",
    # Batch generation
    "GenerationReport",
    "generate_examples",
    # Configuration
    "Settings",
    "settings",
    "get_logger",
    "setup_logging",
    # Errors
    "ExtractorReuseError",
    "JavaParseError",
    "RecipeExamplesError",
]
