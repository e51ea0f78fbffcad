"""Git remote discovery for the current working directory."""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path

from labcli.contracts.remote import RemoteInfo

logger = logging.getLogger(__name__)

_SCP_RE = re.compile(r"^(?:[^@/]+@)?(?P<host>[^:/]+):(?P<path>[^/].*)$")
_URL_RE = re.compile(
    r"^(?P<scheme>ssh|git\+ssh|https?)://(?:[^@/]+@)?(?P<host>[^:/]+)(?::\d+)?/(?P<path>.+)$"
)


def _split_path(path: str) -> tuple[str, str] | None:
    cleaned = path.strip().strip("/")
    if cleaned.endswith(".git"):
        cleaned = cleaned[: -len(".git")]
    namespace, _, project = cleaned.rpartition("/")
    if not namespace or not project:
        return None
    return namespace, project


def parse_remote_url(name: str, url: str) -> RemoteInfo | None:
    raw = url.strip()
    match = _URL_RE.match(raw)
    if match is not None:
        scheme = match.group("scheme")
        protocol = scheme if scheme in {"http", "https"} else "ssh"
    else:
        match = _SCP_RE.match(raw)
        if match is None:
            return None
        protocol = "ssh"

    parts = _split_path(match.group("path"))
    if parts is None:
        return None
    namespace, project = parts
    return RemoteInfo(
        name=name,
        domain=match.group("host").lower(),
        protocol=protocol,
        namespace=namespace,
        project=project,
    )


def parse_remote_listing(output: str) -> list[RemoteInfo]:
    """Parse ``git remote -v`` output, keeping fetch URLs in git's order."""
    remotes: list[RemoteInfo] = []
    seen: set[str] = set()
    for line in output.splitlines():
        fields = line.split()
        if len(fields) < 2:
            continue
        name, url = fields[0], fields[1]
        if len(fields) > 2 and fields[2] != "(fetch)":
            continue
        if name in seen:
            continue
        remote = parse_remote_url(name, url)
        if remote is None:
            logger.debug("Skipping unparseable remote %s: %s", name, url)
            continue
        seen.add(name)
        remotes.append(remote)
    return remotes


def collect_remotes(cwd: str | Path | None = None) -> list[RemoteInfo]:
    try:
        result = subprocess.run(
            ["git", "remote", "-v"],
            capture_output=True,
            text=True,
            timeout=5,
            cwd=cwd,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git remote listing failed: %s", exc)
        return []
    if result.returncode != 0:
        logger.debug("git remote exited with %d: %s", result.returncode, result.stderr.strip())
        return []
    return parse_remote_listing(result.stdout)
