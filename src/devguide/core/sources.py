"""Asset sources for guide content.

An asset source maps a locator to UTF-8 text. Sources are read-only and
hold no open handles between reads.
"""

from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path, PurePosixPath
from typing import Protocol


class AssetSource(Protocol):
    """Read-only store of text assets addressed by locator."""

    def read_text(self, locator: str) -> str:
        """Read the full text of an asset.

        Raises:
            OSError: If the asset is missing or unreadable
            UnicodeDecodeError: If the asset is not valid UTF-8
        """
        ...


class DirectoryAssetSource:
    """Asset source backed by a directory on disk."""

    def __init__(self, root: Path) -> None:
        """Initialize source.

        Args:
            root: Directory locators are resolved against
        """
        self._root = root

    @property
    def root(self) -> Path:
        """Directory locators are resolved against."""
        return self._root

    def read_text(self, locator: str) -> str:
        path = self._root / _checked_locator(locator)
        with path.open("rb") as f:
            return f.read().decode("utf-8")


class PackageAssetSource:
    """Asset source backed by data bundled into a Python package."""

    def __init__(self, package: str = "devguide", subdir: str = "data") -> None:
        """Initialize source.

        Args:
            package: Importable package holding the assets
            subdir: Directory inside the package that locators are relative to
        """
        self._package = package
        self._subdir = subdir

    def read_text(self, locator: str) -> str:
        resource: Traversable = files(self._package).joinpath(self._subdir)
        for part in _checked_locator(locator).parts:
            resource = resource.joinpath(part)
        with resource.open("rb") as f:
            return f.read().decode("utf-8")


def _checked_locator(locator: str) -> PurePosixPath:
    """Validate that a locator stays inside the asset root.

    Raises:
        FileNotFoundError: If the locator is empty, absolute or contains '..'
    """
    path = PurePosixPath(locator)
    if not locator or path.is_absolute() or ".." in path.parts:
        raise FileNotFoundError(f"Invalid asset locator: {locator!r}")
    return path
