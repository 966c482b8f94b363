"""Configuration management for devguide.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

from devguide.core.sources import AssetSource, DirectoryAssetSource, PackageAssetSource

CONFIG_FILENAME = "devguide.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class GuidesConfig:
    """Guide assets configuration.

    assets_dir of None selects the guides bundled with the package.
    """

    assets_dir: Path | None = None


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    guides: GuidesConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for devguide.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(server=ServerConfig(), guides=GuidesConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            guides=cls._parse_guides(data.get("guides"), config_dir),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_guides(cls, data: object, config_dir: Path) -> GuidesConfig:
        """Parse guides configuration section.

        Args:
            data: Raw guides section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            GuidesConfig instance
        """
        if data is None:
            return GuidesConfig()

        if not isinstance(data, dict):
            raise ValueError("guides section must be a dictionary")

        assets_dir = data.get("assets_dir")
        if assets_dir is None:
            return GuidesConfig()
        if not isinstance(assets_dir, str):
            raise ValueError("guides.assets_dir must be a string")

        return GuidesConfig(assets_dir=config_dir / assets_dir)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        assets_dir: Path | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            assets_dir: Override guides.assets_dir

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        guides = self.guides
        if assets_dir is not None:
            guides = replace(self.guides, assets_dir=assets_dir)

        return replace(self, server=server, guides=guides)

    def create_source(self) -> AssetSource:
        """Create the asset source selected by this configuration."""
        if self.guides.assets_dir is not None:
            return DirectoryAssetSource(self.guides.assets_dir)
        return PackageAssetSource()
