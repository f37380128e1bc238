import httpx
import pytest

from apollo_client import ApolloAiClient, ClientConfig


@pytest.fixture
def make_client():
    def _make(handler, **config_overrides) -> ApolloAiClient:
        config = ClientConfig(api_key="test-key", base_url="https://api.test", **config_overrides)
        return ApolloAiClient(config, transport=httpx.MockTransport(handler))

    return _make
