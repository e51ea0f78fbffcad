"""API client bootstrap."""

from labcli.api.client import create_api_client, gitlab_headers

__all__ = ["create_api_client", "gitlab_headers"]
