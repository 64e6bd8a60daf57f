"""Smoke tests – verify all modules are importable and free of syntax errors.

This is an infrastructure test (not a unit test), so it lives in the tests
root rather than under ``tests/unit/``.
"""

from __future__ import annotations

import importlib
import subprocess
import sys

import pytest

# ---------------------------------------------------------------------------
# Module lists
# ---------------------------------------------------------------------------

CORE_MODULES: list[str] = [
    "steambvdf.core.appinfo_parser",
    "steambvdf.core.binary_kv",
    "steambvdf.core.constants",
    "steambvdf.core.cursor",
    "steambvdf.core.errors",
    "steambvdf.core.header",
    "steambvdf.core.logging",
    "steambvdf.core.packageinfo_parser",
    "steambvdf.core.shortcuts_parser",
]

UTILS_MODULES: list[str] = [
    "steambvdf.utils.date_utils",
    "steambvdf.utils.json_exporter",
    "steambvdf.utils.vdf_exporter",
]

TOP_LEVEL_MODULES: list[str] = [
    "steambvdf",
    "steambvdf.config",
    "steambvdf.main",
    "steambvdf.version",
]


# ---------------------------------------------------------------------------
# Parametrized import tests
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("module_path", CORE_MODULES)
def test_import_core_modules(module_path: str) -> None:
    """Core module must be importable without errors."""
    importlib.import_module(module_path)


@pytest.mark.parametrize("module_path", UTILS_MODULES)
def test_import_utils_modules(module_path: str) -> None:
    """Utils module must be importable without errors."""
    importlib.import_module(module_path)


@pytest.mark.parametrize("module_path", TOP_LEVEL_MODULES)
def test_import_top_level_modules(module_path: str) -> None:
    """Top-level module must be importable without errors."""
    importlib.import_module(module_path)


def test_public_api() -> None:
    """Everything in steambvdf.__all__ exists."""
    import steambvdf

    for name in steambvdf.__all__:
        assert hasattr(steambvdf, name), name


# ---------------------------------------------------------------------------
# Circular import check
# ---------------------------------------------------------------------------


def test_no_circular_imports() -> None:
    """All modules can be imported in a fresh subprocess without cycles.

    Uses subprocess isolation to avoid corrupting module references for
    other tests in the same session.
    """
    all_modules = CORE_MODULES + UTILS_MODULES + TOP_LEVEL_MODULES
    import_lines = "; ".join(f"import {m}" for m in all_modules)
    result = subprocess.run(
        [sys.executable, "-c", import_lines],
        capture_output=True,
        text=True,
        timeout=30,
    )
    assert result.returncode == 0, f"Circular import detected:\nstderr: {result.stderr}"


def test_module_entry_point_version() -> None:
    """``python -m steambvdf --version`` prints the version."""
    from steambvdf.version import __version__

    result = subprocess.run(
        [sys.executable, "-m", "steambvdf", "--version"],
        capture_output=True,
        text=True,
        timeout=30,
    )
    assert result.returncode == 0
    assert __version__ in result.stdout
