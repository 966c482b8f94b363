"""Guides API endpoints.

Provides the guide list and single-guide content endpoints.
"""

from hashlib import md5

from aiohttp import web

from devguide.app_keys import loader_key


def create_guides_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/guides", get_guides),
        web.get(r"/api/guides/{guide_id:\d+}", get_guide),
    ]


async def get_guides(request: web.Request) -> web.Response:
    loader = request.app[loader_key]
    sections = loader.get_section_list()
    return web.json_response({"items": [section.to_dict() for section in sections]})


async def get_guide(request: web.Request) -> web.Response:
    guide_id = int(request.match_info["guide_id"])
    loader = request.app[loader_key]

    section = await loader.get_section(guide_id)
    if section is None:
        return web.json_response(
            {"error": "Guide not found", "id": guide_id},
            status=404,
        )

    etag = _compute_etag(section.content or "")

    if_none_match = request.headers.get("If-None-Match")
    if if_none_match == etag:
        return web.Response(status=304)

    return web.json_response(
        section.to_dict(),
        headers={
            "ETag": etag,
            "Cache-Control": "private, max-age=60",
        },
    )


def _compute_etag(content: str) -> str:
    # First 16 hex chars (64 bits) are enough for cache validation
    content_hash = md5(content.encode("utf-8"), usedforsecurity=False).hexdigest()[:16]
    return f'"{content_hash}"'
