"""Batch generation of example YAML files for a tree of recipe tests.

Every ``.java`` file under a source directory is parsed and run through its
own ExamplesExtractor. Non-empty results are written as ``<TestName>.yml``
into ``<output_dir>/<source_dir name>``.
"""

from dataclasses import dataclass
from pathlib import Path

from recipe_examples.exceptions import JavaParseError
from recipe_examples.extraction.extractor import ExamplesExtractor
from recipe_examples.java.parser import JavaParser
from recipe_examples.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class GenerationReport:
    """Outcome of one batch run.

    Attributes:
        parsed: Number of Java files parsed.
        written: YAML files written, in source order.
        skipped: Test files whose YAML file already existed and was kept.
        failed: Test files that could not be read or whose YAML could not be written.
    """

    parsed: int
    written: tuple[Path, ...]
    skipped: tuple[Path, ...]
    failed: tuple[Path, ...]


def collect_java_files(source_dir: Path) -> list[Path]:
    """All ``*.java`` files below ``source_dir``, sorted by path."""
    return sorted(path for path in source_dir.rglob("*.java") if path.is_file())


def example_file_name(test_file_name: str) -> str:
    """``FooTest.java`` -> ``FooTest.yml``; names without an extension get ``.yml`` appended."""
    stem, dot, _ = test_file_name.rpartition(".")
    return f"{stem if dot else test_file_name}.yml"


def write_examples_yaml(test_file_name: str, output_dir: Path, content: str, overwrite: bool = False) -> Path | None:
    """Write ``content`` next to its siblings in ``output_dir``.

    Returns:
        The written path, or None when the file already exists and
        ``overwrite`` is false.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / example_file_name(test_file_name)
    if path.exists() and not overwrite:
        return None
    path.write_text(content, encoding="utf-8")
    logger.info("Generated recipe examples yaml '%s' for the test file '%s'", path.name, test_file_name)
    return path


def generate_examples(source_dir: Path, output_dir: Path, overwrite: bool = False) -> GenerationReport:
    """Extract examples from every Java test file under ``source_dir``.

    Args:
        source_dir: Root of a test source set, e.g. ``src/test/java``.
        output_dir: Root for generated files; a folder named after
            ``source_dir`` is created beneath it.
        overwrite: Replace YAML files that already exist.

    Returns:
        A GenerationReport. Per-file read and write failures are logged and
        recorded; they never abort the batch.
    """
    target_dir = output_dir / source_dir.name
    java_files = collect_java_files(source_dir)
    parser = JavaParser()
    written: list[Path] = []
    skipped: list[Path] = []
    failed: list[Path] = []
    parsed = 0

    logger.info("Parsing %d java files...", len(java_files))
    for java_file in java_files:
        try:
            unit = parser.parse_file(java_file)
        except JavaParseError as e:
            logger.warning("Skipping %s: %s", java_file, e)
            failed.append(java_file)
            continue
        parsed += 1

        extractor = ExamplesExtractor()
        extractor.extract(unit)
        content = extractor.print_yaml()
        if not content:
            continue

        try:
            path = write_examples_yaml(java_file.name, target_dir, content, overwrite=overwrite)
        except OSError as e:
            logger.warning("Cannot write examples for %s: %s", java_file, e)
            failed.append(java_file)
            continue
        if path is None:
            logger.warning("Keeping existing examples for %s", java_file.name)
            skipped.append(java_file)
        else:
            written.append(path)

    logger.info("Wrote %d examples file(s) from %d parsed java files", len(written), parsed)
    return GenerationReport(
        parsed=parsed,
        written=tuple(written),
        skipped=tuple(skipped),
        failed=tuple(failed),
    )
