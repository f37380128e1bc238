from apollo_client.config.settings import ClientConfig

__all__ = ["ClientConfig"]
