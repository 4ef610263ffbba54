"""Exception hierarchy for recipe example extraction.

All exceptions inherit from RecipeExamplesError. The extraction core itself
never raises on malformed test sources; these cover the parser boundary and
misuse of the single-use extractor.
"""


class RecipeExamplesError(Exception):
    """Base exception for all recipe example errors."""


class JavaParseError(RecipeExamplesError):
    """Raised when a Java source file cannot be read or decoded."""


class ExtractorReuseError(RecipeExamplesError):
    """Raised when an ExamplesExtractor is asked to traverse a second tree."""
