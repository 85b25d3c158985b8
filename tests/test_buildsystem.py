from __future__ import annotations

from pathlib import Path

import pytest

from scaffolder.buildsystem import BuildSystemError, build_system_for_id, language_for_id


def test_known_languages() -> None:
    assert language_for_id("java").extension == "java"
    assert language_for_id("kotlin").extension == "kt"
    assert language_for_id("groovy").extension == "groovy"


def test_unknown_language_passes_through() -> None:
    lang = language_for_id("scala")
    assert lang.id == "scala"
    assert lang.extension == "scala"


def test_source_roots(tmp_path: Path) -> None:
    maven = build_system_for_id("maven")
    java = language_for_id("java")
    assert maven.main_source(tmp_path, java) == tmp_path / "src" / "main" / "java"
    assert maven.test_source(tmp_path, java) == tmp_path / "src" / "test" / "java"


def test_gradle_defaults_to_groovy_dialect() -> None:
    assert build_system_for_id("gradle").dialect == "groovy"
    assert build_system_for_id("gradle", "kotlin").dialect == "kotlin"
    assert build_system_for_id("maven").dialect is None


@pytest.mark.parametrize(("build_id", "dialect"), [("ant", None), ("maven", "kotlin"), ("gradle", "scala")])
def test_unrecognized_build_system(build_id: str, dialect: str | None) -> None:
    with pytest.raises(BuildSystemError, match=f"Unrecognized build system id '{build_id}'"):
        build_system_for_id(build_id, dialect)
