from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from apollo_client.config.settings import ClientConfig
from apollo_client.errors import ApolloAiError, MalformedInputError
from apollo_client.schemas import (
    Article,
    AutoAbstractRequest,
    AutoAbstractResponse,
    ClusteringArticle,
    ClusteringResponse,
    ClusteringResultItem,
    ContinuousClusteringOptions,
    ContinuousClusteringRequest,
    ContinuousClusteringResponse,
    Language,
)
from apollo_client.services.identity_validator import ArticleRef, as_article_ref, validate_identities
from apollo_client.services.parameter_encoder import encode_query_params
from apollo_client.services.transport import post_json

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

AUTOABSTRACT_PATH = "/autoabstract"
CLUSTERING_PATH = "/clustering"
CONTINUOUS_CLUSTERING_PATH = "/combinedapi"


class ApolloAiClient:
    """Async client for the Apollo AI autoabstract and clustering endpoints.

    The instance only holds configuration, so one client can serve any number
    of concurrent calls. Every call opens its own HTTP connection.
    """

    def __init__(self, config: ClientConfig, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.config = config
        self._transport = transport

    async def autoabstract(
        self,
        headline: str,
        text: str,
        max_characters: int = 400,
        keywords: Sequence[str] | None = None,
        max_sentences: int | None = None,
        debug: bool = False,
    ) -> AutoAbstractResponse:
        request = self._build_autoabstract_request(
            {"headline": headline, "text": text},
            max_characters=max_characters,
            keywords=keywords,
            max_sentences=max_sentences,
            debug=debug,
        )
        return await self._post(AUTOABSTRACT_PATH, request.to_wire(), AutoAbstractResponse)

    async def autoabstract_from_url(
        self,
        url: str,
        max_characters: int = 400,
        keywords: Sequence[str] | None = None,
        max_sentences: int | None = None,
        debug: bool = False,
    ) -> AutoAbstractResponse:
        request = self._build_autoabstract_request(
            {"url": url},
            max_characters=max_characters,
            keywords=keywords,
            max_sentences=max_sentences,
            debug=debug,
        )
        return await self._post(AUTOABSTRACT_PATH, request.to_wire(), AutoAbstractResponse)

    async def clustering(
        self,
        articles: Sequence[ClusteringArticle | Mapping[str, Any]],
        threshold: float = 0.8,
        language: Language | str = Language.DE,
    ) -> ClusteringResponse:
        try:
            records = _coerce_all(ClusteringArticle, articles, "articles")
            if not records:
                raise MalformedInputError(None, "at least one article is required", "articles")
        except ApolloAiError as exc:
            self._report_rejected(CLUSTERING_PATH, exc)
            raise

        params = encode_query_params(ContinuousClusteringOptions(threshold=threshold, language=language))
        return await self._post(
            CLUSTERING_PATH,
            [record.to_wire() for record in records],
            ClusteringResponse,
            params=params,
            timeout=self.config.clustering_timeout,
        )

    async def continuous_clustering(
        self,
        new_articles: Sequence[ArticleRef | Article | Mapping[str, Any] | str],
        present_articles: Sequence[ClusteringResultItem | Mapping[str, Any]] | None = None,
        options: ContinuousClusteringOptions | Mapping[str, Any] | None = None,
    ) -> ContinuousClusteringResponse:
        try:
            request = self._build_continuous_request(list(new_articles), list(present_articles or []))
        except ApolloAiError as exc:
            self._report_rejected(CONTINUOUS_CLUSTERING_PATH, exc)
            raise

        logger.debug(
            "Continuous clustering of %d new against %d clustered articles",
            len(request.new_articles),
            len(request.result),
        )
        return await self._post(
            CONTINUOUS_CLUSTERING_PATH,
            request.to_wire(),
            ContinuousClusteringResponse,
            params=encode_query_params(options),
            timeout=self.config.clustering_timeout,
        )

    @staticmethod
    def _build_continuous_request(new_articles: list[Any], present_articles: list[Any]) -> ContinuousClusteringRequest:
        outcome = validate_identities(new_articles, present_articles)
        if not outcome.ok:
            raise outcome.error

        refs: list[ArticleRef] = []
        for index, value in enumerate(new_articles):
            try:
                refs.append(as_article_ref(value))
            except (TypeError, ValidationError) as exc:
                raise MalformedInputError(index, str(exc), "new_articles") from exc

        return ContinuousClusteringRequest(
            new_articles=[ref.payload for ref in refs],
            result=_coerce_all(ClusteringResultItem, present_articles, "present_articles"),
        )

    def _report_rejected(self, path: str, error: ApolloAiError) -> None:
        # Nothing was sent; the caller still receives the original error.
        if self.config.debug:
            logger.error("Apollo AI request to %s rejected before sending: %s", path, error)

    @staticmethod
    def _build_autoabstract_request(
        source: dict[str, str],
        *,
        max_characters: int,
        keywords: Sequence[str] | None,
        max_sentences: int | None,
        debug: bool,
    ) -> AutoAbstractRequest:
        # maxSentences replaces maxCharacters whenever both are given.
        if max_sentences is not None:
            length = {"max_sentences": max_sentences}
        else:
            length = {"max_characters": max_characters}

        return AutoAbstractRequest(
            **source,
            **length,
            keywords=",".join(keywords) if keywords else "",
            debug=debug,
        )

    async def _post(
        self,
        path: str,
        body: Any,
        response_model: type[ModelT],
        *,
        params: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> ModelT:
        return await post_json(
            self.config,
            path,
            body=body,
            response_model=response_model,
            params=params,
            timeout=timeout,
            transport=self._transport,
        )


def _coerce_all(model: type[ModelT], items: Sequence[Any], collection: str) -> list[ModelT]:
    coerced: list[ModelT] = []
    for index, item in enumerate(items):
        if isinstance(item, model):
            coerced.append(item)
            continue
        try:
            coerced.append(model.model_validate(item))
        except ValidationError as exc:
            raise MalformedInputError(index, str(exc), collection) from exc
    return coerced
