from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from apollo_client.errors import ApolloAiError, DuplicateArticleError, MalformedInputError
from apollo_client.schemas import Article, ClusteringResultItem


@dataclass(frozen=True)
class ByIdentity:
    id: str

    @property
    def identity(self) -> str:
        return self.id

    @property
    def payload(self) -> str:
        return self.id


@dataclass(frozen=True)
class Full:
    article: Article

    @property
    def identity(self) -> str:
        return self.article.id

    @property
    def payload(self) -> Article:
        return self.article


ArticleRef = Union[ByIdentity, Full]


@dataclass
class ValidationOutcome:
    error: ApolloAiError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def as_article_ref(value: Any) -> ArticleRef:
    if isinstance(value, (ByIdentity, Full)):
        return value
    if isinstance(value, str):
        return ByIdentity(value)
    if isinstance(value, Article):
        return Full(value)
    if isinstance(value, Mapping):
        return Full(Article.model_validate(value))
    raise TypeError(f"Cannot use {type(value).__name__} as an article reference")


def article_identity(value: Any) -> str | None:
    if isinstance(value, (ByIdentity, Full)):
        return value.identity
    if isinstance(value, str):
        return value
    if isinstance(value, Article):
        return value.id
    if isinstance(value, Mapping):
        return value.get("id") or None
    return None


def _present_identity(item: Any) -> str | None:
    if isinstance(item, ClusteringResultItem):
        return item.article.id or None
    if isinstance(item, Mapping):
        article = item.get("article")
        if isinstance(article, (Article, Mapping)):
            return article_identity(article)
    return None


def validate_identities(
    new_articles: Sequence[Any],
    present_articles: Sequence[ClusteringResultItem | Mapping[str, Any]],
) -> ValidationOutcome:
    """Check that no article is submitted both as new and as already clustered.

    Repeated ids inside ``new_articles`` alone are left to the service.
    """
    present_ids: set[str] = set()
    for index, item in enumerate(present_articles):
        identity = _present_identity(item)
        if not isinstance(identity, str) or not identity:
            return ValidationOutcome(MalformedInputError(index, "result item has no article.id", "present_articles"))
        present_ids.add(identity)

    new_ids: list[str] = []
    for index, value in enumerate(new_articles):
        identity = article_identity(value)
        if not isinstance(identity, str) or not identity:
            return ValidationOutcome(MalformedInputError(index, "new article has no id", "new_articles"))
        new_ids.append(identity)

    duplicates = [identity for identity in dict.fromkeys(new_ids) if identity in present_ids]
    if duplicates:
        return ValidationOutcome(DuplicateArticleError(duplicates))
    return ValidationOutcome()
