"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))


@pytest.fixture(scope="function")
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Working directory of the server; the default metadata path ../json sits beside it"""
    directory = tmp_path / "frontend"
    directory.mkdir()
    monkeypatch.chdir(directory)
    return directory


@pytest.fixture(scope="function")
def metadata_dir(tmp_path: Path, workdir: Path) -> Path:
    """Empty directory standing in for the metadata JSON folder, reachable as ../json"""
    directory = tmp_path / "json"
    directory.mkdir()
    return directory


@pytest.fixture(scope="function")
def write_json(metadata_dir: Path):
    """Write raw text to <metadata_dir>/<name>.json"""
    def _write(name: str, content: str) -> Path:
        path = metadata_dir / f"{name}.json"
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture(scope="function")
def client():
    """Create test client for the FastAPI app"""
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as test_client:
        yield test_client
