from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from apollo_client.config.settings import ClientConfig
from apollo_client.errors import ApolloAiError, DecodeError, RemoteError, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_headers(config: ClientConfig) -> dict[str, str]:
    return {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "Authorization": f"Bearer {config.api_key}",
    }


async def post_json(
    config: ClientConfig,
    path: str,
    *,
    body: Any,
    response_model: type[ModelT],
    params: dict[str, str] | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ModelT:
    """POST ``body`` to ``path`` and decode a 200 answer into ``response_model``.

    Raises TransportError, RemoteError or DecodeError. With ``config.debug``
    the failure is logged before it propagates.
    """
    try:
        return await _post_json(
            config,
            path,
            body=body,
            response_model=response_model,
            params=params,
            timeout=config.timeout if timeout is None else timeout,
            transport=transport,
        )
    except ApolloAiError as exc:
        if config.debug:
            logger.error("Apollo AI request to %s failed: %s", path, exc, exc_info=exc)
        raise


async def _post_json(
    config: ClientConfig,
    path: str,
    *,
    body: Any,
    response_model: type[ModelT],
    params: dict[str, str] | None,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None,
) -> ModelT:
    url = config.url_for(path)
    logger.debug("POST %s params=%s", url, params or {})
    try:
        async with httpx.AsyncClient(timeout=timeout, headers=build_headers(config), transport=transport) as client:
            response = await client.post(url, json=body, params=params)
    except httpx.DecodingError as exc:
        raise DecodeError(f"Undecodable response body from {path}: {exc}") from exc
    except httpx.TransportError as exc:
        raise TransportError(exc) from exc

    if response.status_code != 200:
        raise RemoteError(response.status_code, response.text)

    try:
        decoded = response_model.model_validate(response.json())
    except (json.JSONDecodeError, ValidationError) as exc:
        raise DecodeError(f"Invalid response from {path}: {exc}") from exc
    logger.debug("Decoded %s from %s", response_model.__name__, path)
    return decoded
