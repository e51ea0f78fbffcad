"""Remote discovery, filtering and selection."""

from labcli.remotes.catalog import collect_remotes, parse_remote_listing, parse_remote_url
from labcli.remotes.filter import SUPPORTED_DOMAIN_PREFIX, filter_supported_remotes, is_supported_domain
from labcli.remotes.selector import RemoteSelector, preferred_remote, select_remote

__all__ = [
    "SUPPORTED_DOMAIN_PREFIX",
    "RemoteSelector",
    "collect_remotes",
    "filter_supported_remotes",
    "is_supported_domain",
    "parse_remote_listing",
    "parse_remote_url",
    "preferred_remote",
    "select_remote",
]
