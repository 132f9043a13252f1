"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from pkgcategories.core.models import Package
from pkgcategories.core.persistence.snapshot_file import save_snapshot
from pkgcategories.core.services.category_ops import add_categories, add_category
from pkgcategories.core.services.snapshot_ops import build_snapshot

EXAMPLE_MANIFEST = textwrap.dedent("""\
    version: 1
    packages:
      example1:
        version: "2.12.1"
        categories: [development]
      example2:
        categories: [development, system]
        meta:
          license: gpl3Plus
      default:
        description: "the CLI itself"
""")


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep the caller's environment from leaking into CLI tests."""
    for var in ("PKGCAT_SNAPSHOT", "PKGCAT_LOG_LEVEL", "PKGCAT_LOG_FILE", "PKGCAT_LOG_FILE_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def hello() -> Package:
    """An uncategorized package with some pre-existing metadata."""
    return Package(
        name="hello",
        version="2.12.1",
        meta={"license": "gpl3Plus", "homepage": "https://www.gnu.org/software/hello/"},
    )


@pytest.fixture
def example_packages(hello: Package) -> dict[str, Package]:
    """The three example packages, mirroring packages.yml."""
    return {
        "example1": add_category("development", hello),
        "example2": add_categories(["development", "system"], hello),
        "default": Package(name="categories"),
    }


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    """Write the example manifest into a temp directory."""
    path = tmp_path / "packages.yml"
    path.write_text(EXAMPLE_MANIFEST)
    return path


@pytest.fixture
def snapshot_path(tmp_path: Path, example_packages: dict[str, Package]) -> Path:
    """A persisted snapshot of the example packages."""
    path = tmp_path / ".state" / "category-info.json"
    save_snapshot(build_snapshot(example_packages), path)
    return path
