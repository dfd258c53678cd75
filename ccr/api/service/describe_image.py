"""Upstream image-description call (OpenAI-compatible chat completions)."""

from typing import Any

import aiohttp

from ..config.ImageConfig import ImageConfig


def build_image_request(config: ImageConfig, image_data: str, mime_type: str) -> dict[str, Any]:
    """Chat request with one text part and one inline base64 image part."""
    return {
        "model": config.model,
        "messages": [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": config.prompt},
                    {
                        "type": "image_url",
                        "image_url": {"url": f"data:{mime_type};base64,{image_data}"},
                    },
                ],
            }
        ],
        "max_tokens": config.max_tokens,
    }


async def describe_image(
    session: aiohttp.ClientSession,
    config: ImageConfig,
    image_data: str,
    mime_type: str,
) -> dict[str, Any]:
    """Send the image upstream and return the response JSON unchanged.

    Raises:
        RuntimeError: If the upstream answers with a non-200 status
        aiohttp.ClientError: On connection failures
    """
    async with session.post(
        f"{config.api_base.rstrip('/')}/chat/completions",
        headers={
            "Authorization": f"Bearer {config.resolved_api_key()}",
            "Content-Type": "application/json",
        },
        json=build_image_request(config, image_data, mime_type),
        timeout=aiohttp.ClientTimeout(total=config.timeout_secs),
    ) as response:
        if response.status != 200:
            error_text = await response.text()
            raise RuntimeError(f"upstream returned {response.status}: {error_text[:500]}")
        return await response.json()
