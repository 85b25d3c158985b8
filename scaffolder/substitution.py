"""
substitution.py

Responsibility: line-local token substitution applied to boilerplate resources.

Boilerplate files are authored against the placeholder package `com.croot.demo`.
Two literal rules run in order on every line:
1) every `com.croot.demo` becomes the target package name
2) on lines that mention `bs_demo_server`, every `demo` becomes the target package name

Rule 2 is deliberately unscoped: it rewrites any `demo` on such a line, not just the
one inside the marker.
"""

from __future__ import annotations

PLACEHOLDER_PACKAGE = "com.croot.demo"
SERVER_MARKER = "bs_demo_server"
SERVER_TOKEN = "demo"


def substitute(line: str, package_name: str) -> str:
    if PLACEHOLDER_PACKAGE in line:
        line = line.replace(PLACEHOLDER_PACKAGE, package_name)
    if SERVER_MARKER in line:
        line = line.replace(SERVER_TOKEN, package_name)
    return line
