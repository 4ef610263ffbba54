"""Batch example generation and the ``recipe-examples`` command line."""

from recipe_examples.generator.task import (
    GenerationReport,
    collect_java_files,
    example_file_name,
    generate_examples,
    write_examples_yaml,
)

__all__ = [
    "GenerationReport",
    "collect_java_files",
    "example_file_name",
    "generate_examples",
    "write_examples_yaml",
]
