"""Example model collected from recipe test files."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RecipeNameAndParameters:
    """Identity of the recipe under test: fully-qualified name plus constructor arguments."""

    name: str = ""
    parameters: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return bool(self.name)


@dataclass(frozen=True)
class Source:
    """One before/after sample within an example.

    ``after`` is None when the sample has no after state, e.g. when the
    recipe is expected to leave the file unchanged or to delete it.
    """

    before: str | None = None
    after: str | None = None
    path: str | None = None
    language: str | None = None

    @property
    def is_empty(self) -> bool:
        return not has_text(self.before) and not has_text(self.after)


@dataclass(frozen=True)
class Example:
    """One documented test: a description, recipe parameters and its samples in call order."""

    description: str
    parameters: tuple[str, ...]
    sources: tuple[Source, ...]


def has_text(value: str | None) -> bool:
    """True for strings with at least one non-whitespace character."""
    return bool(value and value.strip())
