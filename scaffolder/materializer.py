"""
materializer.py

Responsibility: execute a directory manifest and a file manifest against the filesystem.

Rules:
- Directories are created with all missing ancestors; existing ones are left alone.
- Destination files are created empty when absent, then the templated resource is
  APPENDED. Running twice against the same destination duplicates its content.
- A failure while copying one resource is captured in its CopyResult and logged; it does
  not roll back partial writes. Whether the remaining entries still run is the caller's
  choice (`continue_on_error`).
- Directory creation failures are raised.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from scaffolder.logging import get_logger
from scaffolder.resources import ResourceLocator
from scaffolder.substitution import substitute

logger = get_logger("materializer")


@dataclass(frozen=True)
class CopyResult:
    resource_id: str
    destination: Path
    lines_written: int = 0
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class MaterializeResult:
    directories_created: list[Path] = field(default_factory=list)
    copies: list[CopyResult] = field(default_factory=list)

    @property
    def failures(self) -> list[CopyResult]:
        return [c for c in self.copies if not c.ok]

    @property
    def ok(self) -> bool:
        return not self.failures


def create_directories(directory_manifest: Iterable[Path]) -> list[Path]:
    """
    Create every directory in the manifest that does not exist yet.

    Returns only the directories created by this call, so a second run returns [].
    """
    created: list[Path] = []
    for directory in directory_manifest:
        if directory.exists():
            continue
        directory.mkdir(parents=True, exist_ok=True)
        created.append(directory)
    logger.debug("Created %d directories", len(created))
    return created


def copy_resource(
    resource_id: str,
    destination: Path,
    locator: ResourceLocator,
    package_name: str,
) -> CopyResult:
    """
    Stream one resource through `substitute` and append it to `destination`.
    """
    written = 0
    try:
        if not destination.exists():
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.touch()
        with locator.open(resource_id) as src, destination.open("a", encoding="utf-8", newline="\n") as dst:
            for raw in src:
                dst.write(substitute(raw.rstrip("\r\n"), package_name) + "\n")
                written += 1
    except (OSError, UnicodeError) as e:
        logger.warning("Failed copying %s to %s: %s", resource_id, destination, e)
        return CopyResult(resource_id=resource_id, destination=destination, lines_written=written, error=e)

    logger.debug("Copied %s -> %s (%d lines)", resource_id, destination, written)
    return CopyResult(resource_id=resource_id, destination=destination, lines_written=written)


def materialize(
    directory_manifest: Iterable[Path],
    file_manifest: Mapping[str, Path],
    locator: ResourceLocator,
    package_name: str,
    *,
    continue_on_error: bool = True,
) -> MaterializeResult:
    """
    Create the directory skeleton, then copy every manifest resource.

    With `continue_on_error=False` the copy loop stops after the first failed resource.
    """
    created = create_directories(directory_manifest)

    copies: list[CopyResult] = []
    for resource_id, destination in file_manifest.items():
        result = copy_resource(resource_id, destination, locator, package_name)
        copies.append(result)
        if not result.ok and not continue_on_error:
            logger.warning("Stopping after failed resource %s", resource_id)
            break

    return MaterializeResult(directories_created=created, copies=copies)
