from apollo_client.services.identity_validator import (
    ByIdentity,
    Full,
    ValidationOutcome,
    as_article_ref,
    validate_identities,
)
from apollo_client.services.parameter_encoder import encode_query_params
from apollo_client.services.transport import post_json

__all__ = [
    "ByIdentity",
    "Full",
    "ValidationOutcome",
    "as_article_ref",
    "encode_query_params",
    "post_json",
    "validate_identities",
]
