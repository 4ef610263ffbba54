"""Tests for environment-driven settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from recipe_examples.settings import EXAMPLE_TYPE, Settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("RECIPE_EXAMPLES_EXAMPLE_TYPE", "RECIPE_EXAMPLES_OUTPUT_DIR", "RECIPE_EXAMPLES_OVERWRITE"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.example_type == EXAMPLE_TYPE == "specs.openrewrite.org/v1beta/example"
    assert settings.output_dir == Path("build/rewrite/examples")
    assert settings.overwrite is False


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("RECIPE_EXAMPLES_OUTPUT_DIR", "/tmp/examples")
    monkeypatch.setenv("RECIPE_EXAMPLES_OVERWRITE", "true")
    settings = Settings()
    assert settings.output_dir == Path("/tmp/examples")
    assert settings.overwrite is True


def test_dotenv_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RECIPE_EXAMPLES_EXAMPLE_TYPE", raising=False)
    (tmp_path / ".env").write_text("RECIPE_EXAMPLES_EXAMPLE_TYPE=specs.example.org/v2/example\nUNRELATED=1\n")
    assert Settings().example_type == "specs.example.org/v2/example"


def test_settings_are_frozen(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.overwrite = True
