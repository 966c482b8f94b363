"""Application keys for type-safe app configuration access."""

from aiohttp import web

from devguide.core.loader import GuideLoader

loader_key = web.AppKey("loader", GuideLoader)
