"""Web URL targets."""

from labcli.targets.project_url import SUBPAGE_MARKERS, parse_project_path

__all__ = ["SUBPAGE_MARKERS", "parse_project_path"]
