"""Test configuration and fixtures for project-tree."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def rust_project(tmp_path):
    """Create a small Rust project layout under tmp_path/project."""
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    for directory in ["src", "target", "target/debug", "target/release"]:
        (project_dir / directory).mkdir()
    for file in [".gitignore", "Cargo.toml", "Cargo.lock", "README.md", "src/main.rs"]:
        (project_dir / file).write_text("test data")
    return project_dir


@pytest.fixture
def rust_project_with_gitignore(rust_project):
    """Extend the Rust project with a cache directory and real .gitignore rules."""
    (rust_project / "cache").mkdir()
    (rust_project / "cache" / "cache_file1.dat").write_text("junk data")
    (rust_project / "cache" / "cache_file2.dat").write_text("junk data")
    (rust_project / ".gitignore").write_text("/target\ncache\n")
    return rust_project
