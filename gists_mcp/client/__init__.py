from .gist_client import GistApiError, GistClient, close_client, create_client, get_client

__all__ = ["GistApiError", "GistClient", "close_client", "create_client", "get_client"]
