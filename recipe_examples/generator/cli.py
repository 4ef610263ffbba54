"""CLI for recipe example generation."""

import argparse
import sys
from pathlib import Path

from recipe_examples.exceptions import JavaParseError
from recipe_examples.extraction.extractor import ExamplesExtractor
from recipe_examples.generator.task import generate_examples
from recipe_examples.java.parser import JavaParser
from recipe_examples.logging import setup_logging
from recipe_examples.settings import settings


def main(argv: list[str] | None = None) -> int:
    """Entry point for the recipe examples CLI with generate/show subcommands."""
    parser = argparse.ArgumentParser(prog="recipe-examples", description="Recipe example YAML generator")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Level for every recipe_examples logger (default: from logging configuration)",
    )
    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser("generate", help="Generate example YAML for every test file in a source set")
    generate.add_argument("--source-dir", type=Path, required=True, help="Test source directory, e.g. src/test/java")
    generate.add_argument("--output-dir", type=Path, help=f"Output root (default: {settings.output_dir})")
    generate.add_argument("--overwrite", action="store_true", help="Replace existing YAML files")

    show = subparsers.add_parser("show", help="Print the example YAML for one test file")
    show.add_argument("file", type=Path, help="Java test file")

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1
    if args.log_level:
        setup_logging(level=args.log_level)

    if args.command == "generate":
        return _run_generate(args.source_dir, args.output_dir or settings.output_dir, args.overwrite or settings.overwrite)
    return _run_show(args.file)


def _run_generate(source_dir: Path, output_dir: Path, overwrite: bool) -> int:
    """Generate YAML files and print a summary line per written file."""
    if not source_dir.is_dir():
        print(f"FAIL: source directory {source_dir} does not exist", file=sys.stderr)
        return 1

    report = generate_examples(source_dir, output_dir, overwrite=overwrite)
    for path in report.written:
        print(f"  wrote {path}")
    for path in report.skipped:
        print(f"  skip {path.name} (output exists)")
    for path in report.failed:
        print(f"  fail {path}", file=sys.stderr)

    print(f"\nGenerated {len(report.written)} example files from {report.parsed} java files")
    return 1 if report.failed else 0


def _run_show(path: Path) -> int:
    """Print the YAML for one test file; exit code 1 when it has no examples."""
    try:
        unit = JavaParser().parse_file(path)
    except JavaParseError as e:
        print(f"FAIL: {e}", file=sys.stderr)
        return 1

    extractor = ExamplesExtractor()
    extractor.extract(unit)
    content = extractor.print_yaml()
    if not content:
        print(f"No examples in {path}", file=sys.stderr)
        return 1
    sys.stdout.write(content)
    return 0
