"""Shared test fixtures for the color converter tests."""
import pytest
from fastapi.testclient import TestClient

from color_converter.internal.config import Config
from color_converter.main import create_app


@pytest.fixture
def write_config(tmp_path):
    """Write a config.ini into tmp_path and return its path."""
    def _write(text: str) -> str:
        path = tmp_path / "config.ini"
        path.write_text(text)
        return str(path)
    return _write


@pytest.fixture
def static_dir(tmp_path):
    site = tmp_path / "public"
    site.mkdir()
    (site / "index.html").write_text("<html><body>Color Converter</body></html>")
    return site


@pytest.fixture
def client(write_config, static_dir):
    path = write_config(
        "[SERVER]\n"
        f"static_dir = {static_dir}\n"
        "cors_origins = http://localhost:3001\n"
    )
    with TestClient(create_app(Config(path))) as test_client:
        yield test_client
