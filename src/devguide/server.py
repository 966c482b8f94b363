"""aiohttp server for devguide.

Application factory and route registration for the local guide viewer.
The viewer is a single-user stand-in for the guide list and detail screens:
it binds to 127.0.0.1 by default and has no accounts, sessions or writes.
"""

import logging

from aiohttp import web

from devguide.api.guides import create_guides_routes
from devguide.app_keys import loader_key
from devguide.config import Config
from devguide.core.loader import GuideLoader

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[loader_key] = GuideLoader(source=config.create_source())

    app.router.add_routes(create_guides_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Serving guides on {config.server.host}:{config.server.port}")
    web.run_app(app, host=config.server.host, port=config.server.port)
