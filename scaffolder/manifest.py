"""
manifest.py

Responsibility: derive the directory and file plan for a generated project.

Both builders are pure: they only compute paths and never touch the filesystem.
Adding or moving a catalog entry is a change to the constants below, not to the
function signatures.
"""

from __future__ import annotations

from pathlib import Path

from scaffolder.buildsystem import language_for_id

PACKAGE_DIRECTORIES: tuple[str, ...] = (
    "comm/config",
    "controller",
    "entity",
    "dao",
    "repository",
    "service",
    "global",
    "global/cache",
    "global/constant",
    "global/enums",
    "rest/request",
    "rest/response",
    "utils",
)

MAPPERS_DIRECTORY = "src/main/resources/mappers"

RESP_CODE_RESOURCE = "classpath:configuration/RespCode.java"

# resource id -> destination relative to the project root
RESOURCE_FILES: dict[str, str] = {
    "classpath:configuration/generatorConfig.xml": "src/main/resources/generatorConfig.xml",
    "classpath:configuration/generatorConfigTk.xml": "src/main/resources/generatorConfigTk.xml",
    "classpath:configuration/Logback.xml": "src/main/resources/Logback.xml",
    "classpath:configuration/mybatisGeneratorinit.properties": "src/main/resources/mybatisGeneratorinit.properties",
}


def package_path(package_name: str) -> str:
    """
    Convert `com.example.app` into `com/example/app`.

    No validation: an empty name yields an empty segment.
    """
    return package_name.replace(".", "/")


def _package_root(project_root: Path, language_id: str, package_name: str) -> Path:
    # String concatenation keeps an empty package collapsing onto the language root.
    return Path(f"{project_root}/src/main/{language_id}/{package_path(package_name)}")


def build_directory_manifest(project_root: str | Path, language_id: str, package_name: str) -> tuple[Path, ...]:
    """
    Return the 14 directories a project skeleton needs, in creation order.

    The first 13 live under `src/main/<language>/<package path>/`; the last one is the
    package-independent MyBatis mapper folder.
    """
    root = Path(project_root)
    base = _package_root(root, language_id, package_name)
    paths = [base / suffix for suffix in PACKAGE_DIRECTORIES]
    paths.append(root / MAPPERS_DIRECTORY)
    return tuple(paths)


def build_file_manifest(project_root: str | Path, language_id: str, package_name: str) -> dict[str, Path]:
    """
    Return the boilerplate resources to materialize, keyed by resource id.

    Only the response-code enum lands inside the package; the rest go to the resource root.
    """
    root = Path(project_root)
    extension = language_for_id(language_id).extension
    manifest = {
        RESP_CODE_RESOURCE: _package_root(root, language_id, package_name) / "comm" / f"RespCode.{extension}",
    }
    for resource_id, relative in RESOURCE_FILES.items():
        manifest[resource_id] = root / relative
    return manifest
