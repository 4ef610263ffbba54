"""Tests for the batch example generator."""

from pathlib import Path
from unittest.mock import patch

import yaml

from recipe_examples.generator.task import (
    GenerationReport,
    collect_java_files,
    example_file_name,
    generate_examples,
    write_examples_yaml,
)
from tests.support.helpers import write_java

DOCUMENTED = """
package org.example;

import org.junit.jupiter.api.Test;
import org.openrewrite.DocumentExample;
import static org.openrewrite.test.SourceSpecs.text;

class {name} {{
    @DocumentExample("{name} example")
    @Test
    void run() {{
        rewriteRun(spec -> spec.recipe(new MyRecipe()), text("before", "after"));
    }}
}}
"""

UNDOCUMENTED = """
class Plain {
    @org.junit.jupiter.api.Test
    void run() {}
}
"""


def _source_set(tmp_path: Path) -> Path:
    source_dir = tmp_path / "src" / "test" / "java"
    write_java(source_dir / "org" / "example" / "FooTest.java", DOCUMENTED.format(name="FooTest"))
    write_java(source_dir / "org" / "example" / "nested" / "BarTest.java", DOCUMENTED.format(name="BarTest"))
    write_java(source_dir / "org" / "example" / "Plain.java", UNDOCUMENTED)
    (source_dir / "org" / "example" / "notes.txt").write_text("not java")
    return source_dir


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------


def test_collect_java_files_is_recursive_and_sorted(tmp_path):
    source_dir = _source_set(tmp_path)
    files = collect_java_files(source_dir)
    assert [f.relative_to(source_dir).as_posix() for f in files] == [
        "org/example/FooTest.java",
        "org/example/Plain.java",
        "org/example/nested/BarTest.java",
    ]


def test_collect_java_files_empty_dir(tmp_path):
    assert collect_java_files(tmp_path) == []


def test_example_file_name():
    assert example_file_name("FooTest.java") == "FooTest.yml"
    assert example_file_name("archive.tar.gz") == "archive.tar.yml"
    assert example_file_name("README") == "README.yml"


def test_write_examples_yaml_creates_directories(tmp_path):
    output_dir = tmp_path / "out" / "java"
    path = write_examples_yaml("FooTest.java", output_dir, "content\n")
    assert path == output_dir / "FooTest.yml"
    assert path.read_text() == "content\n"


def test_write_examples_yaml_keeps_existing_file(tmp_path):
    existing = tmp_path / "FooTest.yml"
    existing.write_text("old\n")
    assert write_examples_yaml("FooTest.java", tmp_path, "new\n") is None
    assert existing.read_text() == "old\n"


def test_write_examples_yaml_overwrite(tmp_path):
    existing = tmp_path / "FooTest.yml"
    existing.write_text("old\n")
    assert write_examples_yaml("FooTest.java", tmp_path, "new\n", overwrite=True) == existing
    assert existing.read_text() == "new\n"


# ---------------------------------------------------------------------------
# generate_examples
# ---------------------------------------------------------------------------


def test_generate_writes_one_file_per_documented_test(tmp_path):
    source_dir = _source_set(tmp_path)
    output_dir = tmp_path / "build" / "rewrite" / "examples"

    report = generate_examples(source_dir, output_dir)

    target = output_dir / "java"
    assert report == GenerationReport(
        parsed=3,
        written=(target / "FooTest.yml", target / "BarTest.yml"),
        skipped=(),
        failed=(),
    )
    assert sorted(p.name for p in target.iterdir()) == ["BarTest.yml", "FooTest.yml"]
    data = yaml.safe_load((target / "FooTest.yml").read_text())
    assert data["recipeName"] == "org.example.MyRecipe"
    assert data["examples"][0]["description"] == "FooTest example"
    assert data["examples"][0]["sources"] == [{"before": "before", "after": "after", "language": "text"}]


def test_generate_skips_existing_files(tmp_path):
    source_dir = _source_set(tmp_path)
    output_dir = tmp_path / "out"
    (output_dir / "java").mkdir(parents=True)
    (output_dir / "java" / "FooTest.yml").write_text("keep me\n")

    report = generate_examples(source_dir, output_dir)

    assert [p.name for p in report.written] == ["BarTest.yml"]
    assert [p.name for p in report.skipped] == ["FooTest.java"]
    assert (output_dir / "java" / "FooTest.yml").read_text() == "keep me\n"


def test_generate_overwrite_replaces_existing_files(tmp_path):
    source_dir = _source_set(tmp_path)
    output_dir = tmp_path / "out"
    (output_dir / "java").mkdir(parents=True)
    (output_dir / "java" / "FooTest.yml").write_text("stale\n")

    report = generate_examples(source_dir, output_dir, overwrite=True)

    assert len(report.written) == 2
    assert report.skipped == ()
    assert (output_dir / "java" / "FooTest.yml").read_text().startswith("type: specs.openrewrite.org/v1beta/example\n")


def test_generate_continues_after_unreadable_file(tmp_path):
    source_dir = _source_set(tmp_path)
    broken = source_dir / "Broken.java"
    broken.write_bytes(b"class Caf\xe9 {}")

    report = generate_examples(source_dir, tmp_path / "out")

    assert report.failed == (broken,)
    assert report.parsed == 3
    assert len(report.written) == 2


def test_generate_continues_after_write_failure(tmp_path):
    source_dir = _source_set(tmp_path)
    with patch("recipe_examples.generator.task.write_examples_yaml", side_effect=OSError("disk full")):
        report = generate_examples(source_dir, tmp_path / "out")
    assert report.written == ()
    assert len(report.failed) == 2


def test_generate_empty_source_dir(tmp_path):
    source_dir = tmp_path / "java"
    source_dir.mkdir()
    report = generate_examples(source_dir, tmp_path / "out")
    assert report == GenerationReport(parsed=0, written=(), skipped=(), failed=())
    assert not (tmp_path / "out").exists()
