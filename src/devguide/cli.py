"""CLI interface for devguide.

Command-line tool for browsing the bundled Android development guides.
"""

import asyncio
import logging
from pathlib import Path

import click

from devguide.config import Config
from devguide.core.loader import GuideLoader

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Path to configuration file (default: auto-discover devguide.toml)",
)
assets_dir_option = click.option(
    "--assets-dir",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory holding guide assets (overrides config, default: bundled guides)",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)


@click.group()
def cli() -> None:
    """devguide - Android development best-practice guides."""


@cli.command("list")
@config_option
@assets_dir_option
@verbose_option
def list_guides(config_path: Path | None, assets_dir: Path | None, verbose: bool) -> None:
    """List available guides."""
    loader = _create_loader(config_path, assets_dir, verbose)
    for section in loader.get_section_list():
        click.echo(f"{section.id}. {section.title}")


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("guide_id", type=int)
@config_option
@assets_dir_option
@verbose_option
def show(
    guide_id: int,
    config_path: Path | None,
    assets_dir: Path | None,
    verbose: bool,
) -> None:
    """Print the content of a guide."""
    loader = _create_loader(config_path, assets_dir, verbose)
    section = asyncio.run(loader.get_section(guide_id))
    if section is None:
        raise click.ClickException(f"Guide {guide_id} not found")

    click.echo(section.content)


@cli.command()
@config_option
@assets_dir_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@verbose_option
def serve(
    config_path: Path | None,
    assets_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the guide viewer server."""
    from devguide.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        assets_dir=assets_dir,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    if config.guides.assets_dir is not None:
        click.echo(f"Guides directory: {config.guides.assets_dir}")
    else:
        click.echo("Guides: bundled with the package")

    run_server(config)


def _create_loader(
    config_path: Path | None,
    assets_dir: Path | None,
    verbose: bool,
) -> GuideLoader:
    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(assets_dir=assets_dir)
    return GuideLoader(source=config.create_source())


def _load_config(config_path: Path | None) -> Config:
    """Load config, reporting errors as CLI failures."""
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
