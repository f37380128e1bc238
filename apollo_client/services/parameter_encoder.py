from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from apollo_client.schemas import ContinuousClusteringOptions


def encode_query_params(options: ContinuousClusteringOptions | Mapping[str, Any] | None) -> dict[str, str]:
    """Map clustering options onto the query parameters the service reads.

    Only fields that are set produce a parameter; the order is fixed as
    ``maxChars``, ``keywords``, ``threshold``, ``language``.
    """
    if options is None:
        return {}
    if not isinstance(options, ContinuousClusteringOptions):
        options = ContinuousClusteringOptions.model_validate(dict(options))

    params: dict[str, str] = {}
    if options.abstract_max_chars is not None:
        params["maxChars"] = str(options.abstract_max_chars)
    if options.keywords is not None:
        params["keywords"] = ",".join(options.keywords)
    if options.threshold is not None:
        params["threshold"] = str(options.threshold)
    if options.language is not None:
        params["language"] = options.language.value
    return params
