"""
cli.py

Responsibility: CLI entrypoint for boot-scaffolder.

Commands:
- `generate`: parse a description -> write the main source -> materialize manifests
- `boot-versions`: list the Spring Boot versions known to the bundled metadata

This module orchestrates behavior but keeps concerns isolated:
- Description parsing: `description.py`
- Generation: `generator.py`
- Version metadata: `metadata.py`
"""

from __future__ import annotations

import argparse
import os
from dataclasses import replace
from pathlib import Path

from scaffolder.buildsystem import BuildSystemError
from scaffolder.description import BuildSystemSpec, DescriptionError, ProjectDescription, parse_description
from scaffolder.generator import generate_project
from scaffolder.logging import configure_logging, get_logger
from scaffolder.metadata import BootMetadataReader, MetadataError
from scaffolder.renderer import RenderError
from scaffolder.resources import ClasspathResourceLocator

RESOURCES_DIR_ENV = "SCAFFOLDER_RESOURCES_DIR"

logger = get_logger("cli")


class CLIError(RuntimeError):
    pass


def _ensure_empty_dir(path: Path, *, overwrite: bool) -> None:
    if path.exists() and not path.is_dir():
        raise CLIError(f"Workdir is not a directory: {path}")
    path.mkdir(parents=True, exist_ok=True)
    if not overwrite:
        if any(path.iterdir()):
            raise CLIError(f"Workdir is not empty: {path} (use --overwrite to allow)")


def _apply_overrides(description: ProjectDescription, args: argparse.Namespace) -> ProjectDescription:
    build_system = description.build_system
    if args.build_system or args.dialect:
        build_system = BuildSystemSpec(
            id=args.build_system or build_system.id,
            dialect=args.dialect if args.dialect is not None else build_system.dialect,
        )
    return replace(
        description,
        package_name=args.package_name or description.package_name,
        language=args.language or description.language,
        application_name=args.application_name or description.application_name,
        boot_version=args.boot_version or description.boot_version,
        build_system=build_system,
    )


def _resolve_boot_version(description: ProjectDescription, metadata: BootMetadataReader) -> str:
    known = {v.id for v in metadata.boot_versions()}
    if description.boot_version is None:
        default = metadata.default_version()
        if default is None:
            raise CLIError("No Spring Boot versions available in metadata")
        return default.id
    if description.boot_version not in known:
        raise CLIError(f"Unknown Spring Boot version: {description.boot_version}")
    return description.boot_version


def _resources_dir(args: argparse.Namespace) -> str | None:
    return args.resources_dir or os.environ.get(RESOURCES_DIR_ENV) or None


def generate_cmd(args: argparse.Namespace) -> int:
    description = _apply_overrides(parse_description(args.description_path), args)
    metadata = BootMetadataReader.from_file(args.metadata)
    description = replace(description, boot_version=_resolve_boot_version(description, metadata))

    workdir = Path(args.workdir or Path("generated") / description.name).resolve()
    _ensure_empty_dir(workdir, overwrite=bool(args.overwrite))

    logger.info("Spring Boot %s", description.boot_version)
    result = generate_project(
        description,
        workdir,
        locator=ClasspathResourceLocator(_resources_dir(args)),
        continue_on_error=not bool(args.fail_fast),
    )

    for failure in result.materialized.failures:
        print(f"FAILED {failure.resource_id} -> {failure.destination}: {failure.error}")
    if not result.ok:
        return 1

    print(f"Project generated at {result.project_root}")
    return 0


def boot_versions_cmd(args: argparse.Namespace) -> int:
    metadata = BootMetadataReader.from_file(args.metadata)
    for version in metadata.boot_versions():
        marker = " (default)" if version.default else ""
        print(f"{version.id}\t{version.name}{marker}")
    return 0


def _add_verbose_option(parser: argparse.ArgumentParser, *, suppress_default: bool = False) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Increase log verbosity for troubleshooting.",
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="boot-scaffolder", description="Generate Spring Boot project skeletons")
    _add_verbose_option(p)
    p.add_argument("--log-file", default=None, help="Also write logs (with timestamps) to this file.")
    sub = p.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Generate a project skeleton from a description file")
    _add_verbose_option(g, suppress_default=True)
    g.add_argument("description_path", help="Path to the project description (YAML or markdown frontmatter)")
    g.add_argument("--workdir", default=None, help="Project root to generate into (default: generated/<name>)")
    g.add_argument(
        "--overwrite",
        action="store_true",
        help="Allow a non-empty workdir (existing boilerplate files get the content appended again)",
    )
    g.add_argument("--package-name", default=None, help="Base package (overrides description.package_name)")
    g.add_argument("--language", default=None, help="Source language: java, kotlin or groovy")
    g.add_argument("--application-name", default=None, help="Main application class name")
    g.add_argument("--build-system", default=None, help="Build system id: maven or gradle")
    g.add_argument("--dialect", default=None, help="Build system dialect (gradle: groovy or kotlin)")
    g.add_argument("--boot-version", default=None, help="Spring Boot version (default: current release)")
    g.add_argument("--fail-fast", action="store_true", help="Stop at the first boilerplate file that fails to copy")
    g.add_argument(
        "--resources-dir",
        default=None,
        help=f"Directory holding boilerplate resources (or set env {RESOURCES_DIR_ENV})",
    )
    g.add_argument("--metadata", default=None, help="Spring Boot metadata JSON (default: bundled record)")
    g.set_defaults(func=generate_cmd)

    v = sub.add_parser("boot-versions", help="List available Spring Boot versions")
    _add_verbose_option(v, suppress_default=True)
    v.add_argument("--metadata", default=None, help="Spring Boot metadata JSON (default: bundled record)")
    v.set_defaults(func=boot_versions_cmd)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=bool(args.verbose), log_file=Path(args.log_file) if args.log_file else None)
    try:
        return int(args.func(args))
    except (CLIError, DescriptionError, BuildSystemError, MetadataError, RenderError) as e:
        parser.exit(2, f"boot-scaffolder: error: {e}\n")
    except OSError as e:
        logger.debug("Filesystem error", exc_info=True)
        parser.exit(2, f"boot-scaffolder: error: {e}\nRun with --verbose for more details.\n")


if __name__ == "__main__":
    raise SystemExit(main())
