"""Basic tests to verify project structure."""

import pytest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def test_project_structure():
    """Test that the project structure is correct."""
    # Check main package exists
    package = ROOT / "cluster_size_suggestion"
    assert package.exists()
    assert (package / "__init__.py").exists()

    # Check submodules exist
    submodules = ["collectors", "models", "analytics", "config", "utils"]
    for submodule in submodules:
        assert (package / submodule).exists()
        assert (package / submodule / "__init__.py").exists()

    # Check CLI exists
    assert (package / "cli.py").exists()

    # Check test structure
    for submodule in submodules:
        assert (ROOT / "tests" / submodule).exists()


def test_config_files_exist():
    """Test that configuration files exist."""
    assert (ROOT / "pyproject.toml").exists()
    assert (ROOT / "requirements.txt").exists()
    assert (ROOT / "README.md").exists()
    assert (ROOT / "Makefile").exists()


def test_package_import():
    """Test that the package can be imported."""
    try:
        import cluster_size_suggestion

        assert cluster_size_suggestion.__version__ == "0.1.0"
        assert callable(cluster_size_suggestion.analyze_target)
    except ImportError:
        pytest.skip("Package not installed in development mode")


if __name__ == "__main__":
    pytest.main([__file__])
