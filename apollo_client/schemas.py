from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Language(str, Enum):
    EN = "en"
    DE = "de"


class Article(WireModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(min_length=1)
    headline: str | None = None
    content: str
    url: str | None = None
    date: datetime | None = None
    abstract: list[str] | None = None


class ClusteringResultItem(WireModel):
    article: Article
    related: list[str] = Field(default_factory=list)


class ContinuousClusteringOptions(WireModel):
    abstract_max_chars: int | None = Field(default=None, gt=0)
    keywords: list[str] | None = None
    threshold: float | None = Field(default=None, ge=0.0, le=1.0)
    language: Language | None = None


class ContinuousClusteringRequest(WireModel):
    new_articles: list[str | Article]
    result: list[ClusteringResultItem]


class ContinuousClusteringResponse(WireModel):
    new_articles: list[str | Article]
    result: list[ClusteringResultItem]
    invalid_articles: list[Any] = Field(default_factory=list)


class ClusteringArticle(WireModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    identifier: str = Field(min_length=1)
    title: str
    content: str
    url: str | None = None
    date: datetime | None = None


class ClusteringResponse(WireModel):
    status: int
    message: str
    data: list[list[ClusteringArticle]]


class AutoAbstractRequest(WireModel):
    headline: str | None = Field(default=None, min_length=1)
    text: str | None = Field(default=None, min_length=1)
    url: str | None = Field(default=None, min_length=1)
    max_characters: int | None = Field(default=None, gt=0)
    max_sentences: int | None = Field(default=None, gt=0)
    keywords: str = ""
    debug: bool = False

    @model_validator(mode="after")
    def check_content_source(self) -> "AutoAbstractRequest":
        has_text = self.headline is not None and self.text is not None
        if has_text == (self.url is not None):
            raise ValueError("either headline and text, or url, must be provided")
        if self.max_characters is not None and self.max_sentences is not None:
            raise ValueError("maxCharacters and maxSentences are mutually exclusive")
        return self


class AutoAbstractResponse(WireModel):
    sentences: list[str]
    detected_language: str | None = None
    processed_language: str | None = None
    input: Any = None
    type: str
    url: str
