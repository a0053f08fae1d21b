"""Test project setup and structure"""

import importlib
from pathlib import Path


def test_package_imports():
    """Verify all core dependencies are importable"""
    importlib.import_module("typer")
    importlib.import_module("rich")
    importlib.import_module("pydantic")
    importlib.import_module("yaml")
    importlib.import_module("ruamel.yaml")
    importlib.import_module("questionary")
    importlib.import_module("aiofiles")


def test_directory_structure():
    """Verify project directory structure"""
    base_dir = Path(__file__).parent.parent

    assert (base_dir / "coursefinder").is_dir()
    assert (base_dir / "coursefinder" / "__init__.py").is_file()
    assert (base_dir / "coursefinder" / "core").is_dir()
    assert (base_dir / "coursefinder" / "cli.py").is_file()
    assert (base_dir / "tests").is_dir()
    assert (base_dir / "tests" / "unit").is_dir()
    assert (base_dir / "tests" / "integration").is_dir()


def test_bundled_documents_present():
    """Verify sample questionnaire ships with the package"""
    data_dir = Path(__file__).parent.parent / "coursefinder" / "data"

    for name in ("questions.yaml", "programs.yaml", "config.yaml"):
        assert (data_dir / name).is_file()
