from apollo_client.client import ApolloAiClient
from apollo_client.config import ClientConfig
from apollo_client.errors import (
    ApolloAiError,
    DecodeError,
    DuplicateArticleError,
    MalformedInputError,
    RemoteError,
    TransportError,
)
from apollo_client.schemas import (
    Article,
    AutoAbstractResponse,
    ClusteringArticle,
    ClusteringResponse,
    ClusteringResultItem,
    ContinuousClusteringOptions,
    ContinuousClusteringResponse,
    Language,
)

__all__ = [
    "ApolloAiClient",
    "ApolloAiError",
    "Article",
    "AutoAbstractResponse",
    "ClientConfig",
    "ClusteringArticle",
    "ClusteringResponse",
    "ClusteringResultItem",
    "ContinuousClusteringOptions",
    "ContinuousClusteringResponse",
    "DecodeError",
    "DuplicateArticleError",
    "Language",
    "MalformedInputError",
    "RemoteError",
    "TransportError",
]
