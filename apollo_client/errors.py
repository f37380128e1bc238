from __future__ import annotations


class ApolloAiError(Exception):
    """Base class for every failure raised by the client."""


class TransportError(ApolloAiError):
    """The request could not be completed (connection failure, timeout)."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Request to Apollo AI failed: {cause}")
        self.cause = cause


class RemoteError(ApolloAiError):
    """The service answered with a status other than 200."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"Apollo AI responded with status {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeError(ApolloAiError):
    """A 200 response body did not match the expected shape."""


class MalformedInputError(ApolloAiError, ValueError):
    def __init__(self, index: int | None, reason: str, collection: str | None = None) -> None:
        location = "input" if index is None else f"item {index}"
        if collection:
            location = f"{collection} {location}"
        super().__init__(f"Malformed {location}: {reason}")
        self.index = index
        self.reason = reason
        self.collection = collection


class DuplicateArticleError(ApolloAiError, ValueError):
    def __init__(self, ids: list[str]) -> None:
        super().__init__(f"Articles submitted as both new and already clustered: {', '.join(ids)}")
        self.ids = ids
