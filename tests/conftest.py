"""Shared test fixtures."""

from pathlib import Path

import pytest
from devguide.config import Config, GuidesConfig, ServerConfig


@pytest.fixture
def guide_one_text() -> str:
    """Content written for guide 1 in assets_dir."""
    return "# Tools...\n\nInstall Android Studio.\n"


@pytest.fixture
def assets_dir(tmp_path: Path, guide_one_text: str) -> Path:
    """Create an assets directory holding only the first guide."""
    assets = tmp_path / "assets"
    guides = assets / "guides"
    guides.mkdir(parents=True)
    (guides / "tools_and_environment_setup.md").write_bytes(guide_one_text.encode("utf-8"))
    return assets


@pytest.fixture
def test_config(assets_dir: Path) -> Config:
    """Create a test configuration reading guides from assets_dir."""
    return Config(
        server=ServerConfig(),
        guides=GuidesConfig(assets_dir=assets_dir),
    )
