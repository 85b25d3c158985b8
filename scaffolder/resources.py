"""
resources.py

Responsibility: locate boilerplate resources by id and open them as UTF-8 text.

Resource ids look like `classpath:configuration/Logback.xml`. The `classpath:` prefix is
optional and the remainder is resolved against a base directory (the bundled
`scaffolder/data/` directory unless another one is injected).
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, TextIO

CLASSPATH_PREFIX = "classpath:"

_DEFAULT_RESOURCES_DIR = Path(__file__).parent / "data"


class ResourceNotFoundError(FileNotFoundError):
    pass


class ResourceLocator(Protocol):
    def open(self, resource_id: str) -> TextIO:
        """Open `resource_id` for reading; the caller closes the stream."""
        ...


class ClasspathResourceLocator:
    """Stateless lookup of resource ids under a base directory."""

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else _DEFAULT_RESOURCES_DIR

    def resolve(self, resource_id: str) -> Path:
        name = resource_id[len(CLASSPATH_PREFIX) :] if resource_id.startswith(CLASSPATH_PREFIX) else resource_id
        path = self.base_dir / name.lstrip("/")
        if not path.is_file():
            raise ResourceNotFoundError(f"Resource not found: {resource_id} (looked in {self.base_dir})")
        return path

    def open(self, resource_id: str) -> TextIO:
        return self.resolve(resource_id).open("r", encoding="utf-8")
