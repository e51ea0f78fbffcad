"""Remote repository contracts."""

from __future__ import annotations

from pydantic import BaseModel


class RemoteInfo(BaseModel):
    """One configured git remote pointing at a hosted repository."""

    name: str
    domain: str
    protocol: str = "https"
    namespace: str
    project: str

    model_config = {"frozen": True}

    @property
    def project_path(self) -> str:
        return f"{self.namespace}/{self.project}"

    def base_url(self) -> str:
        scheme = "http" if self.protocol == "http" else "https"
        return f"{scheme}://{self.domain}"

    def api_url(self) -> str:
        return f"{self.base_url()}/api/v4"

    def web_url(self) -> str:
        return f"{self.base_url()}/{self.project_path}"

    def subpage_url(self, page: str) -> str:
        return f"{self.web_url()}/{page.strip('/')}"
