"""Background service process.

A small aiohttp application. It registers its own pid on start and removes
the record on exit. It exposes:

    GET  /health         -> liveness JSON
    POST /upload-image   -> describe a base64 image via the upstream chat API
    POST /v1/messages    -> verbatim relay to the configured upstream

Usage:
    python -m ccr.api.service._child_runner [--host 127.0.0.1] [--port 3456]
"""

from __future__ import annotations

import logging
import os

import aiohttp
from aiohttp import web

from ..config.CCRConfig import CCRConfig
from ..registry.clear_pid import clear_pid
from ..registry.read_pid import read_pid
from ..registry.write_pid import write_pid
from .describe_image import describe_image
from .is_service_running import is_service_running

log = logging.getLogger("ccr.service.server")

# Request headers copied onto relayed upstream requests
_RELAYED_HEADERS = ("content-type", "anthropic-version", "anthropic-beta")


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


async def handle_health(request: web.Request) -> web.Response:
    return web.json_response({"status": "ok", "pid": os.getpid()})


async def handle_upload_image(request: web.Request) -> web.Response:
    """POST /upload-image - {imageData, mimeType} in, upstream JSON out."""
    try:
        data = await request.json()
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}

    image_data = data.get("imageData")
    if not image_data:
        return web.json_response({"error": "No image data provided"}, status=400)
    mime_type = data.get("mimeType") or "image/jpeg"

    config: CCRConfig = request.app["config"]
    try:
        response = await describe_image(request.app["client"], config.image, image_data, mime_type)
    except Exception:
        log.exception("Image upload error")
        return web.json_response({"error": "Failed to process image"}, status=500)
    return web.json_response(response)


async def handle_messages(request: web.Request) -> web.StreamResponse:
    """POST /v1/messages - relay body and response to the upstream as-is."""
    config: CCRConfig = request.app["config"]
    body = await request.read()

    headers = {name: request.headers[name] for name in _RELAYED_HEADERS if name in request.headers}
    headers["x-api-key"] = config.upstream.resolved_api_key()
    url = f"{config.upstream.base_url.rstrip('/')}/v1/messages"

    client: aiohttp.ClientSession = request.app["client"]
    try:
        upstream = await client.post(url, data=body, headers=headers)
    except aiohttp.ClientError as exc:
        log.error("upstream request to %s failed: %s", url, exc)
        return web.json_response({"error": "Upstream request failed"}, status=502)

    async with upstream:
        response = web.StreamResponse(status=upstream.status)
        response.content_type = upstream.content_type
        await response.prepare(request)
        async for chunk in upstream.content.iter_any():
            await response.write(chunk)
        await response.write_eof()
    return response


# ---------------------------------------------------------------------------
# Application lifecycle
# ---------------------------------------------------------------------------


async def on_startup(app: web.Application) -> None:
    app["client"] = aiohttp.ClientSession()


async def on_cleanup(app: web.Application) -> None:
    await app["client"].close()


def create_app(config: CCRConfig) -> web.Application:
    """Build the service application."""
    app = web.Application(client_max_size=64 * 1024 * 1024)  # pasted images can be large
    app["config"] = config
    app.on_startup.append(on_startup)
    app.on_cleanup.append(on_cleanup)
    app.router.add_get("/health", handle_health)
    app.router.add_post("/upload-image", handle_upload_image)
    app.router.add_post("/v1/messages", handle_messages)
    return app


def run_server(config: CCRConfig, host: str | None = None, port: int | None = None) -> int:
    """Run the service in the foreground (blocking). Returns a process exit code."""
    host = host or config.host
    port = port or config.port

    if is_service_running():
        log.error("Service already running (pid %s)", read_pid())
        return 1

    write_pid(os.getpid())
    try:
        log.info("Starting service on %s:%s", host, port)
        web.run_app(create_app(config), host=host, port=port, print=lambda msg: log.info(msg))
    finally:
        # Leave a newer service's record alone
        if read_pid() == os.getpid():
            clear_pid()
        log.info("Service exiting")
    return 0
