"""Auth module public exports."""

from labcli.auth.resolver import TokenResolver, resolve_token

__all__ = ["TokenResolver", "resolve_token"]
