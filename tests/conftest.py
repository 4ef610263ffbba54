"""Common test fixtures for recipe example extraction."""

import pytest

from recipe_examples.java.parser import JavaParser


@pytest.fixture
def java_parser() -> JavaParser:
    return JavaParser()
