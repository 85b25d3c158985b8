"""Shared pytest fixtures for the scaffolder test suite."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _reset_scaffolder_logger():
    """configure_logging() detaches the logger from root; undo it so caplog keeps working."""
    yield
    logger = logging.getLogger("scaffolder")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def package_name() -> str:
    return "com.acme.app"


@pytest.fixture
def resources_dir(tmp_path: Path) -> Path:
    """A small resource tree laid out like the bundled `data/` directory."""
    base = tmp_path / "resources"
    (base / "configuration").mkdir(parents=True)
    (base / "configuration" / "RespCode.java").write_text(
        "package com.croot.demo.comm;\n\npublic enum RespCode {\n}\n",
        encoding="utf-8",
    )
    (base / "configuration" / "Logback.xml").write_text(
        '<property name="APP_NAME" value="bs_demo_server"/>\n<root level="INFO"/>\n',
        encoding="utf-8",
    )
    return base
