"""Vulture whitelist: methods called by frameworks, not direct code."""

# TreeVisitor dispatch, called through getattr(self, f"visit_{node.type}")
from recipe_examples.extraction.extractor import ExamplesExtractor

ExamplesExtractor.visit_method_declaration
ExamplesExtractor.visit_method_invocation
ExamplesExtractor.visit_constructor_declaration
