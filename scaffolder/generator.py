"""
generator.py

Responsibility: run one project generation end to end.

Order of work:
1) Write the main application source file
2) Build the directory and file manifests for the package
3) Materialize both manifests against the project root
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from scaffolder.buildsystem import build_system_for_id, language_for_id
from scaffolder.description import ProjectDescription
from scaffolder.logging import get_logger
from scaffolder.manifest import build_directory_manifest, build_file_manifest
from scaffolder.materializer import MaterializeResult, materialize
from scaffolder.renderer import MainApplicationCustomizer, build_main_application_type, write_main_application
from scaffolder.resources import ClasspathResourceLocator, ResourceLocator

logger = get_logger("generator")


@dataclass(frozen=True)
class GenerationResult:
    project_root: Path
    main_source: Path
    materialized: MaterializeResult

    @property
    def ok(self) -> bool:
        return self.materialized.ok


def generate_project(
    description: ProjectDescription,
    project_root: str | Path,
    *,
    locator: ResourceLocator | None = None,
    customizers: Iterable[MainApplicationCustomizer] = (),
    continue_on_error: bool = True,
    template_dir: str | Path | None = None,
) -> GenerationResult:
    root = Path(project_root).resolve()
    language = language_for_id(description.language)
    build_system = build_system_for_id(description.build_system.id, description.build_system.dialect)
    locator = locator if locator is not None else ClasspathResourceLocator()

    logger.info(
        "Generating %s (%s, %s/%s) into %s",
        description.name,
        description.package_name,
        language.id,
        build_system.id,
        root,
    )

    main_type = build_main_application_type(description.application_name, description.package_name, customizers)
    main_source = write_main_application(
        project_root=root,
        build_system=build_system,
        language=language,
        main_type=main_type,
        template_dir=template_dir,
    )
    logger.debug("Wrote main application %s", main_source)

    directories = build_directory_manifest(root, language.id, description.package_name)
    files = build_file_manifest(root, language.id, description.package_name)
    result = materialize(
        directories,
        files,
        locator,
        description.package_name,
        continue_on_error=continue_on_error,
    )

    if result.ok:
        logger.info(
            "Created %d directories and %d files", len(result.directories_created), len(result.copies)
        )
    else:
        logger.warning("%d of %d resources failed to copy", len(result.failures), len(files))

    return GenerationResult(project_root=root, main_source=main_source, materialized=result)
