"""Tests for annotation, declaration and call matchers."""

from recipe_examples.extraction.matchers import (
    DEFAULTS_METHOD,
    DOCUMENT_EXAMPLE_ANNOTATION,
    PATH_METHOD,
    REWRITE_RUN_METHOD,
    TEST_ANNOTATION,
    AnnotationMatcher,
    MethodMatcher,
    annotations,
    callback_parameter_names,
    has_annotation,
    is_callback,
    is_recipe_type,
    receiver_root,
)
from recipe_examples.java.parser import JavaParser
from recipe_examples.java.tree import call_arguments
from recipe_examples.java.types import TypeResolver
from tests.support.helpers import all_nodes, find_call

SOURCE = """
package org.example;

import org.junit.jupiter.api.Test;
import org.openrewrite.DocumentExample;
import org.openrewrite.test.RecipeSpec;
import org.openrewrite.test.RewriteTest;

import static org.openrewrite.java.Assertions.java;

class FooTest implements RewriteTest {
    @Override
    public void defaults(RecipeSpec spec) {
        spec.recipe(new Foo());
    }

    public void defaults(String notASpec) {
    }

    @DocumentExample
    @Test
    void documented() {
        rewriteRun(spec -> spec.parser(p).recipe(new Foo()), java("class A {}"));
    }

    @Test
    void plain() {
        rewriteRun(
          (RecipeSpec s) -> s.recipe(new Foo()),
          org.openrewrite.java.Assertions.java("class B {}"),
          kotlin("class C"),
          java("class D {}", spec -> spec.path("src/D.java"))
        );
    }
}
"""


def _unit():
    unit = JavaParser().parse(SOURCE)
    return unit, TypeResolver.from_tree(unit.root)


def _methods(root):
    return all_nodes(root, "method_declaration")


def test_annotation_matchers():
    unit, resolver = _unit()
    defaults, _, documented, plain = _methods(unit.root)
    assert has_annotation(documented, TEST_ANNOTATION, resolver)
    assert has_annotation(documented, DOCUMENT_EXAMPLE_ANNOTATION, resolver)
    assert has_annotation(plain, TEST_ANNOTATION, resolver)
    assert not has_annotation(plain, DOCUMENT_EXAMPLE_ANNOTATION, resolver)
    assert not has_annotation(defaults, TEST_ANNOTATION, resolver)
    assert [a.type for a in annotations(documented)] == ["marker_annotation", "marker_annotation"]


def test_annotation_matcher_requires_resolvable_type():
    unit, resolver = _unit()
    _, _, documented, _ = _methods(unit.root)
    testng = AnnotationMatcher("org.testng.annotations.Test")
    assert not has_annotation(documented, testng, resolver)


def test_defaults_method_matcher():
    unit, resolver = _unit()
    defaults, other_defaults, documented, _ = _methods(unit.root)
    assert DEFAULTS_METHOD.matches(defaults, resolver)
    assert not DEFAULTS_METHOD.matches(other_defaults, resolver)
    assert not DEFAULTS_METHOD.matches(documented, resolver)


def test_method_matcher_static_import_and_qualified_receiver():
    unit, resolver = _unit()
    java_assertion = MethodMatcher("org.openrewrite.java.Assertions", "java")
    kotlin_assertion = MethodMatcher("org.openrewrite.kotlin.Assertions", "kotlin")
    java_calls = [c for c in all_nodes(unit.root, "method_invocation") if java_assertion.matches(c, resolver)]
    assert len(java_calls) == 3
    # kotlin is neither imported nor qualified
    assert not kotlin_assertion.matches(find_call(unit.root, "kotlin"), resolver)


def test_method_matcher_arity():
    unit, resolver = _unit()
    path_call = find_call(unit.root, "path")
    assert PATH_METHOD.matches(path_call, resolver)
    assert not MethodMatcher(None, "path", arity=2).matches(path_call, resolver)


def test_rewrite_run_matcher():
    unit, resolver = _unit()
    runs = [c for c in all_nodes(unit.root, "method_invocation") if REWRITE_RUN_METHOD.matches(c, resolver)]
    assert len(runs) == 2


def test_callback_parameter_names():
    unit, _ = _unit()
    first_run, second_run = [c for c in all_nodes(unit.root, "method_invocation") if c.child_by_field_name("name").text == b"rewriteRun"]
    first_callback = call_arguments(first_run)[0]
    second_callback = call_arguments(second_run)[0]
    assert is_callback(first_callback) and is_callback(second_callback)
    assert callback_parameter_names(first_callback) == {"spec"}
    assert callback_parameter_names(second_callback) == {"s"}
    assert not is_callback(call_arguments(second_run)[1])


def test_callback_parameter_names_inferred_parameters():
    unit = JavaParser().parse("class T { void m() { rewriteRun((spec) -> spec.recipe(r)); } }")
    callback = call_arguments(find_call(unit.root, "rewriteRun"))[0]
    assert callback_parameter_names(callback) == {"spec"}


def test_receiver_root_follows_call_chains():
    unit, _ = _unit()
    recipe_calls = [c for c in all_nodes(unit.root, "method_invocation") if c.child_by_field_name("name").text == b"recipe"]
    assert [receiver_root(c) for c in recipe_calls] == ["spec", "spec", "s"]
    assert receiver_root(find_call(unit.root, "rewriteRun")) is None


def test_is_recipe_type():
    source = """
    package org.example;
    class LocalRecipe extends org.openrewrite.Recipe {}
    class NotARecipe extends java.util.ArrayList {}
    class Derived extends LocalRecipe {}
    """
    resolver = TypeResolver.from_tree(JavaParser().parse(source).root)
    assert is_recipe_type("org.example.LocalRecipe", resolver)
    assert is_recipe_type("org.example.Derived", resolver)
    assert not is_recipe_type("org.example.NotARecipe", resolver)
    assert is_recipe_type("org.example.ImportedRecipe", resolver)
    assert not is_recipe_type("java.lang.StringBuilder", resolver)
    assert not is_recipe_type("org.openrewrite.test.AdHocRecipe", resolver)
    assert not is_recipe_type("org.openrewrite.config.YamlResourceLoader", resolver)
    assert not is_recipe_type("org.openrewrite.InMemoryExecutionContext", resolver)
