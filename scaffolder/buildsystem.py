"""
buildsystem.py

Responsibility: map language and build-system ids to the source layout of a generated project.

Only the layout matters here; no build files are emitted.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class BuildSystemError(ValueError):
    pass


@dataclass(frozen=True)
class Language:
    """A source language: `id` names the source root, `extension` the file suffix."""

    id: str
    extension: str


_LANGUAGES: dict[str, Language] = {
    "java": Language(id="java", extension="java"),
    "kotlin": Language(id="kotlin", extension="kt"),
    "groovy": Language(id="groovy", extension="groovy"),
}


def language_for_id(language_id: str) -> Language:
    """
    Return the known Language for `language_id`.

    Unknown ids are passed through with the id doubling as the extension.
    """
    return _LANGUAGES.get(language_id, Language(id=language_id, extension=language_id))


@dataclass(frozen=True)
class BuildSystem:
    id: str
    dialect: str | None = None

    def main_source(self, project_root: Path, language: Language) -> Path:
        return project_root / "src" / "main" / language.id

    def test_source(self, project_root: Path, language: Language) -> Path:
        return project_root / "src" / "test" / language.id


# id -> (supported dialects, default dialect)
_BUILD_SYSTEMS: dict[str, tuple[tuple[str, ...], str | None]] = {
    "maven": ((), None),
    "gradle": (("groovy", "kotlin"), "groovy"),
}


def build_system_for_id(build_system_id: str, dialect: str | None = None) -> BuildSystem:
    known = _BUILD_SYSTEMS.get(build_system_id)
    if known is None:
        raise BuildSystemError(f"Unrecognized build system id '{build_system_id}' and dialect '{dialect}'")
    dialects, default_dialect = known
    if dialect is None:
        return BuildSystem(id=build_system_id, dialect=default_dialect)
    if dialect not in dialects:
        raise BuildSystemError(f"Unrecognized build system id '{build_system_id}' and dialect '{dialect}'")
    return BuildSystem(id=build_system_id, dialect=dialect)
