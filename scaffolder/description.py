"""
description.py

Responsibility: Load and parse a project description file into a typed model.

Accepted inputs:
- A markdown file that starts with YAML frontmatter (`---` delimited).
- A plain YAML document (`.yml` / `.yaml` or any file without frontmatter that parses
  as a YAML mapping).

The generator and CLI treat the parsed `ProjectDescription` as the single source of truth.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


class DescriptionError(ValueError):
    pass


@dataclass(frozen=True)
class BuildSystemSpec:
    """Build system selection parsed from the description."""

    id: str = "maven"
    dialect: str | None = None


@dataclass(frozen=True)
class ProjectDescription:
    """What to generate: naming, package, language and build system of one project."""

    name: str
    package_name: str
    application_name: str
    language: str = "java"
    build_system: BuildSystemSpec = field(default_factory=BuildSystemSpec)
    boot_version: str | None = None
    description: str = ""


def _parse_yaml_frontmatter(text: str) -> tuple[dict[str, Any] | None, str]:
    """
    If the markdown begins with YAML frontmatter delimited by '---', parse it.
    Returns (frontmatter_dict_or_none, remaining_markdown_text).
    """
    if not text.startswith("---\n"):
        return None, text

    end = text.find("\n---\n", 4)
    if end == -1:
        raise DescriptionError("YAML frontmatter starts with '---' but no closing '---' was found.")

    fm_text = text[4:end]
    rest = text[end + len("\n---\n") :]
    try:
        data = yaml.safe_load(fm_text) or {}
    except yaml.YAMLError as e:
        raise DescriptionError(f"YAML frontmatter is not valid YAML: {e}") from e
    if not isinstance(data, dict):
        raise DescriptionError("YAML frontmatter must be a mapping/object at the top level.")
    return data, rest


def _load_yaml_document(text: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise DescriptionError(f"Description is not valid YAML: {e}") from e
    if not isinstance(data, dict):
        raise DescriptionError("Description must be a mapping/object at the top level.")
    return data


def default_package_name(name: str) -> str:
    """`My Service-2` -> `com.example.myservice2`."""
    return "com.example." + re.sub(r"[^a-z0-9]", "", name.lower())


def default_application_name(name: str) -> str:
    """`bs-order server` -> `BsOrderServerApplication`."""
    parts = [p for p in re.split(r"[^A-Za-z0-9]+", name) if p]
    base = "".join(p[:1].upper() + p[1:] for p in parts)
    if not base or not base[0].isalpha():
        base = "Demo" + base
    return base + "Application"


def _parse_build_system(raw: Any) -> BuildSystemSpec:
    if raw is None:
        return BuildSystemSpec()
    if isinstance(raw, str):
        return BuildSystemSpec(id=raw.strip() or "maven")
    if not isinstance(raw, dict):
        raise DescriptionError("`build_system` must be a string or an object/mapping when provided.")
    dialect = raw.get("dialect")
    if dialect is not None:
        dialect = str(dialect).strip() or None
    return BuildSystemSpec(id=str(raw.get("id") or "maven").strip(), dialect=dialect)


def description_from_mapping(data: dict[str, Any]) -> ProjectDescription:
    """
    Build a `ProjectDescription` from already-loaded key/values.

    Recognized keys:
    - name: str (required)
    - package_name: str
    - application_name: str
    - language: str
    - build_system: str | {id, dialect}
    - boot_version: str
    - description: str
    """
    name = str(data.get("name") or "").strip()
    if not name:
        raise DescriptionError("Description must define `name`.")

    package_name = str(data.get("package_name") or "").strip() or default_package_name(name)
    application_name = str(data.get("application_name") or "").strip() or default_application_name(name)
    language = str(data.get("language") or "java").strip()

    boot_version = data.get("boot_version")
    if boot_version is not None:
        boot_version = str(boot_version).strip() or None

    return ProjectDescription(
        name=name,
        package_name=package_name,
        application_name=application_name,
        language=language,
        build_system=_parse_build_system(data.get("build_system")),
        boot_version=boot_version,
        description=str(data.get("description") or "").strip(),
    )


def parse_description(path: str | Path) -> ProjectDescription:
    """Parse a description file (markdown with frontmatter, or plain YAML)."""
    p = Path(path)
    if not p.exists():
        raise DescriptionError(f"Description file does not exist: {p}")
    text = p.read_text(encoding="utf-8")

    frontmatter, _rest = _parse_yaml_frontmatter(text)
    data = frontmatter if frontmatter is not None else _load_yaml_document(text)
    return description_from_mapping(data)
