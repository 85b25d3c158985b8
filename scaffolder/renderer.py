"""
renderer.py

Responsibility: render the main application entry point of a generated project.

Rules:
- One Jinja2 template per language under `scaffolder/templates/<language>/Application.j2`.
- The main type is annotated before rendering; customizers run afterwards, in the order
  they were given, and may add or replace annotations.
- Output is written with `\n` newlines for stable cross-platform results.

This module intentionally does NOT know about manifests or boilerplate resources.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from scaffolder.buildsystem import BuildSystem, Language
from scaffolder.manifest import package_path

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

SPRING_BOOT_APPLICATION = "org.springframework.boot.autoconfigure.SpringBootApplication"
MAPPER_SCAN = "tk.mybatis.spring.annotation.MapperScan"

_LANGUAGE_IMPORTS: dict[str, tuple[str, ...]] = {
    "java": ("org.springframework.boot.SpringApplication",),
    "kotlin": ("org.springframework.boot.runApplication",),
    "groovy": ("org.springframework.boot.SpringApplication",),
}


class RenderError(RuntimeError):
    pass


@dataclass(frozen=True)
class Annotation:
    name: str
    attributes: tuple[tuple[str, tuple[str, ...]], ...] = ()

    @property
    def simple_name(self) -> str:
        return self.name.rsplit(".", 1)[-1]


@dataclass
class MainApplicationType:
    """The entry-point type as it will be rendered. Customizers mutate it in place."""

    name: str
    package_name: str
    annotations: list[Annotation] = field(default_factory=list)

    def annotate(self, annotation: Annotation) -> None:
        """Add `annotation`, replacing any existing one with the same name."""
        self.annotations = [a for a in self.annotations if a.name != annotation.name]
        self.annotations.append(annotation)


MainApplicationCustomizer = Callable[[MainApplicationType], None]


def mapper_scan_annotation(package_name: str) -> Annotation:
    return Annotation(
        name=MAPPER_SCAN,
        attributes=(("basePackages", (f"{package_name}.dao", f"{package_name}.dao.**")),),
    )


def _quoted(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _environment(template_dir: Path) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["quoted"] = _quoted
    return env


def build_main_application_type(
    application_name: str,
    package_name: str,
    customizers: Iterable[MainApplicationCustomizer] = (),
) -> MainApplicationType:
    main_type = MainApplicationType(name=application_name, package_name=package_name)
    main_type.annotate(Annotation(name=SPRING_BOOT_APPLICATION))
    main_type.annotate(mapper_scan_annotation(package_name))
    for customizer in customizers:
        customizer(main_type)
    return main_type


def render_main_application(
    main_type: MainApplicationType,
    language: Language,
    *,
    template_dir: str | Path | None = None,
) -> str:
    tpl_dir = Path(template_dir) if template_dir is not None else _DEFAULT_TEMPLATE_DIR
    env = _environment(tpl_dir)
    imports = sorted(set(_LANGUAGE_IMPORTS.get(language.id, ())) | {a.name for a in main_type.annotations})
    try:
        template = env.get_template(f"{language.id}/Application.j2")
        return template.render(
            package_name=main_type.package_name,
            application_name=main_type.name,
            annotations=main_type.annotations,
            imports=imports,
        )
    except TemplateError as e:
        raise RenderError(f"Failed rendering main application for language '{language.id}'") from e


def write_main_application(
    *,
    project_root: Path,
    build_system: BuildSystem,
    language: Language,
    main_type: MainApplicationType,
    template_dir: str | Path | None = None,
) -> Path:
    """
    Render the main type and write it under the build system's main source root.

    Returns the written path.
    """
    content = render_main_application(main_type, language, template_dir=template_dir)
    src_dir = build_system.main_source(project_root, language)
    pkg = package_path(main_type.package_name)
    out_dir = src_dir / pkg if pkg else src_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    out = out_dir / f"{main_type.name}.{language.extension}"
    out.write_text(content, encoding="utf-8", newline="\n")
    return out
