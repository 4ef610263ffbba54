"""Recipe example extraction from OpenRewrite-style recipe tests.

Finds ``@Test @DocumentExample`` methods, resolves the recipe under test and
collects the before/after samples passed to ``rewriteRun``, then renders
them as a deterministic YAML document.
"""

from recipe_examples.extraction.extractor import ExamplesExtractor, extract_examples
from recipe_examples.extraction.model import Example, RecipeNameAndParameters, Source
from recipe_examples.extraction.printer import render_examples_yaml
from recipe_examples.extraction.recipes import extract_parameters, find_recipe
from recipe_examples.extraction.samples import SAMPLE_SHAPES, SampleShape, extract_source

__all__ = [
    "SAMPLE_SHAPES",
    "Example",
    "ExamplesExtractor",
    "RecipeNameAndParameters",
    "SampleShape",
    "Source",
    "extract_examples",
    "extract_parameters",
    "extract_source",
    "find_recipe",
    "render_examples_yaml",
]
