"""Image command - send a piped image to the service's /upload-image endpoint."""

from collections.abc import Iterator
from typing import Any

import requests

from ..config.CCRConfig import CCRConfig
from ..sniff.SniffedPayload import SniffedPayload
from ..StageResult import StageResult
from . import CodeImageOutput


def cmd_image(payload: SniffedPayload) -> StageResult:
    """Forward ``payload`` to the running service and pass its answer through."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = CCRConfig.load()
        except ValueError as exc:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {exc}"
            result_obj.output = CodeImageOutput(
                errors=[str(exc)],
                warnings=[],
                mime_type=payload.mime_type.value,
                size=len(payload.data),
                status_code=-1,
                response={},
            ).model_dump(mode="python")
            result_obj.success = False
            return

        url = f"{config.endpoint}/upload-image"
        yield (0.4, f"Uploading {payload.mime_type.value} image ({len(payload.data)} bytes)...")
        try:
            response = requests.post(url, json=payload.to_request(), timeout=config.image.timeout_secs + 5)
        except requests.RequestException as exc:
            yield (1.0, "Complete")
            result_obj.result = f"Error contacting service at {url}: {exc}"
            result_obj.output = CodeImageOutput(
                errors=[str(exc)],
                warnings=[],
                mime_type=payload.mime_type.value,
                size=len(payload.data),
                status_code=-1,
                response={},
            ).model_dump(mode="python")
            result_obj.success = False
            return

        body: Any
        try:
            body = response.json()
        except ValueError:
            body = {"text": response.text}
        if not isinstance(body, dict):
            body = {"data": body}

        yield (1.0, "Complete")
        if response.ok:
            result_obj.result = "Image processed"
            errors: list[str] = []
        else:
            detail = body.get("error", response.reason)
            result_obj.result = f"Image processing failed ({response.status_code}): {detail}"
            errors = [str(detail)]
        result_obj.output = CodeImageOutput(
            errors=errors,
            warnings=[],
            mime_type=payload.mime_type.value,
            size=len(payload.data),
            status_code=response.status_code,
            response=body,
        ).model_dump(mode="python")
        result_obj.success = response.ok

    return StageResult(
        announce="Sending piped image...",
        progress_callback=do_work,
    )
