"""
scaffolder package

This package implements boot-scaffolder, a CLI-first Spring Boot project skeleton generator.

Key responsibilities are split across modules:
- `description.py`: parse a project description file into a typed model
- `buildsystem.py`: language and build-system lookups (source roots, file extensions)
- `manifest.py`: derive the directory and boilerplate-file plan from a package name
- `substitution.py`: line-level placeholder replacement for boilerplate resources
- `resources.py`: locate bundled boilerplate resources by id
- `materializer.py`: execute a plan against the filesystem
- `renderer.py`: Jinja2 rendering of the main application class
- `metadata.py`: Spring Boot version metadata from a bundled record
- `generator.py`: one end-to-end generation run
- `cli.py`: CLI entrypoint and orchestration
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
