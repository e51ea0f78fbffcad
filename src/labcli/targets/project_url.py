"""GitLab web URL parsing utilities."""

from __future__ import annotations

import re

from labcli.contracts.exceptions import ProjectURLError

SUBPAGE_MARKERS = frozenset({"issues", "merge_requests"})
_ROUTE_SEPARATOR = "-"
_MIN_SEGMENTS = 5
_QUERY_RE = re.compile(r"[?#]")


def parse_project_path(url: str) -> str:
    """Reduce a GitLab web URL to its ``namespace/project`` path.

    The path ends right before the last ``issues`` or ``merge_requests`` segment,
    so nested groups are kept intact::

        https://gitlab.example.com/group/sub/project/-/merge_requests/3 -> group/sub/project

    Without a sub-page marker the path ends at GitLab's ``/-/`` route separator; a URL
    with neither is rejected.

    Raises:
        ProjectURLError: If the URL has too few segments, has no sub-page marker or
            route separator, or yields fewer than two path segments.
    """
    base = _QUERY_RE.split(url.strip(), maxsplit=1)[0]
    segments = base.split("/")
    if len(segments) < _MIN_SEGMENTS:
        raise ProjectURLError(f"Not a project URL (too few path segments): {url}")

    path = segments[3:]
    marker_index = None
    for index, segment in enumerate(path):
        if segment in SUBPAGE_MARKERS:
            marker_index = index
    if marker_index is not None:
        path = path[:marker_index]
    elif _ROUTE_SEPARATOR in path:
        path = path[: path.index(_ROUTE_SEPARATOR)]
    else:
        raise ProjectURLError(f"No issues or merge_requests page in URL: {url}")

    while path and path[-1] in {"", _ROUTE_SEPARATOR}:
        path.pop()
    if len(path) < 2 or any(not segment for segment in path):
        raise ProjectURLError(f"Cannot find project path in URL: {url}")
    return "/".join(path)
