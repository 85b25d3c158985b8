"""
metadata.py

Responsibility: read Spring Boot release metadata and expose the selectable boot versions.

The metadata is a fixed record bundled with the package (`data/metadata/spring-boot.json`);
nothing is fetched over the network.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

_DEFAULT_METADATA = Path(__file__).parent / "data" / "metadata" / "spring-boot.json"

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)(?:[.-]([^0-9]+)(\d+)?)?$")


class MetadataError(ValueError):
    pass


@dataclass(frozen=True)
class Qualifier:
    id: str
    version: int | None = None


@dataclass(frozen=True)
class Version:
    major: int
    minor: int
    patch: int
    qualifier: Qualifier | None = None


@dataclass(frozen=True)
class BootVersion:
    id: str
    name: str
    default: bool = False


def parse_version(text: str) -> Version | None:
    """
    Parse `2.3.2.RELEASE`, `2.4.0-M1` or `2.4.0` style versions.

    Returns None when `text` does not follow that grammar.
    """
    m = _VERSION_RE.match(text.strip())
    if m is None:
        return None
    major, minor, patch, qualifier_id, qualifier_version = m.groups()
    qualifier = None
    if qualifier_id:
        qualifier = Qualifier(
            id=qualifier_id,
            version=int(qualifier_version) if qualifier_version is not None else None,
        )
    return Version(major=int(major), minor=int(minor), patch=int(patch), qualifier=qualifier)


def display_name(version: Version) -> str:
    """`2.2.9`, `2.3.3 (SNAPSHOT)`, `2.4.0 (M1)`."""
    name = f"{version.major}.{version.minor}.{version.patch}"
    q = version.qualifier
    if q is None or q.id == "RELEASE":
        return name
    if "SNAPSHOT" in q.id:
        return f"{name} (SNAPSHOT)"
    suffix = q.id + (str(q.version) if q.version is not None else "")
    return f"{name} ({suffix})"


def _as_bool(value: Any) -> bool:
    # The published record encodes booleans as strings.
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


class BootMetadataReader:
    """Parsed view over one metadata record. Create a new instance to re-read."""

    def __init__(self, content: dict[str, Any]) -> None:
        if not isinstance(content, dict):
            raise MetadataError("Metadata must be a JSON object at the top level.")
        releases = content.get("projectReleases")
        if not isinstance(releases, list):
            raise MetadataError("Metadata is missing the `projectReleases` list.")
        for index, node in enumerate(releases):
            if not isinstance(node, dict):
                raise MetadataError(f"`projectReleases[{index}]` must be an object, got {type(node).__name__}.")
        self._releases = releases

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> BootMetadataReader:
        p = Path(path) if path is not None else _DEFAULT_METADATA
        try:
            content = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise MetadataError(f"Metadata file is not valid JSON: {p}") from e
        except (OSError, UnicodeError) as e:
            raise MetadataError(f"Cannot read metadata file {p}: {e}") from e
        return cls(content)

    def boot_versions(self) -> list[BootVersion]:
        versions: list[BootVersion] = []
        for node in self._releases:
            version_id = str(node.get("version") or "")
            version = parse_version(version_id)
            if version is None:
                continue
            versions.append(
                BootVersion(id=version_id, name=display_name(version), default=_as_bool(node.get("current", False)))
            )
        return versions

    def default_version(self) -> BootVersion | None:
        versions = self.boot_versions()
        for v in versions:
            if v.default:
                return v
        return versions[0] if versions else None
