"""Tests for asset sources."""

from pathlib import Path

import pytest
from devguide.core.catalog import GUIDE_CATALOG
from devguide.core.sources import DirectoryAssetSource, PackageAssetSource


class TestDirectoryAssetSource:
    """Tests for DirectoryAssetSource.read_text()."""

    def test__existing_file__returns_text(self, tmp_path: Path) -> None:
        """Read file content relative to the root."""
        (tmp_path / "guides").mkdir()
        (tmp_path / "guides" / "a.md").write_text("# A\n", encoding="utf-8")

        source = DirectoryAssetSource(tmp_path)

        assert source.read_text("guides/a.md") == "# A\n"

    def test__crlf_and_unicode__returned_verbatim(self, tmp_path: Path) -> None:
        """Line endings and non-ASCII text are not transformed."""
        (tmp_path / "a.md").write_bytes("# Ünïcode\r\nline\r\n".encode())

        source = DirectoryAssetSource(tmp_path)

        assert source.read_text("a.md") == "# Ünïcode\r\nline\r\n"

    def test__missing_file__raises_file_not_found(self, tmp_path: Path) -> None:
        """Missing assets raise FileNotFoundError."""
        source = DirectoryAssetSource(tmp_path)

        with pytest.raises(FileNotFoundError):
            source.read_text("guides/missing.md")

    def test__directory_locator__raises_os_error(self, tmp_path: Path) -> None:
        """A locator naming a directory is unreadable."""
        (tmp_path / "guides").mkdir()
        source = DirectoryAssetSource(tmp_path)

        with pytest.raises(OSError):
            source.read_text("guides")

    def test__invalid_utf8__raises_unicode_decode_error(self, tmp_path: Path) -> None:
        """Non-UTF-8 bytes are reported as decode errors."""
        (tmp_path / "bad.md").write_bytes(b"\xff\xfe\xfa")
        source = DirectoryAssetSource(tmp_path)

        with pytest.raises(UnicodeDecodeError):
            source.read_text("bad.md")

    @pytest.mark.parametrize("locator", ["", "../secret.md", "guides/../../x.md", "/etc/passwd"])
    def test__escaping_locator__raises_file_not_found(
        self, tmp_path: Path, locator: str
    ) -> None:
        """Locators outside the root are rejected."""
        source = DirectoryAssetSource(tmp_path)

        with pytest.raises(FileNotFoundError, match="Invalid asset locator"):
            source.read_text(locator)


class TestPackageAssetSource:
    """Tests for PackageAssetSource.read_text()."""

    def test__bundled_guides__all_readable(self) -> None:
        """Every catalog locator resolves to bundled Markdown."""
        source = PackageAssetSource()

        for entry in GUIDE_CATALOG:
            text = source.read_text(entry.locator)
            assert text.startswith("# "), entry.locator

    def test__first_guide__starts_with_tools_heading(self) -> None:
        """The environment setup guide is bundled."""
        source = PackageAssetSource()

        assert source.read_text("guides/tools_and_environment_setup.md").startswith("# Tools")

    def test__missing_asset__raises_os_error(self) -> None:
        """Unknown bundled assets raise an OSError."""
        source = PackageAssetSource()

        with pytest.raises(OSError):
            source.read_text("guides/missing.md")
