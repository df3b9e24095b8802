"""
Project link checker.

Authoring-time check that every project card's link still resolves.
Runtime code never validates links; run this before publishing.
"""

import requests
from dataclasses import dataclass
from typing import List, Optional

from portfolio.config import REQUEST_TIMEOUT
from portfolio.models.project import Project

USER_AGENT = "portfolio-link-checker/1.0"


@dataclass
class LinkCheckResult:
    """Result of checking a single project link."""
    title: str
    url: Optional[str]
    ok: bool
    status_code: Optional[int] = None
    error: Optional[str] = None
    skipped: bool = False

    def __str__(self) -> str:
        if self.skipped:
            return f"- {self.title}: no link"
        if self.ok:
            return f"✓ {self.title}: {self.url} ({self.status_code})"
        detail = self.error or f"HTTP {self.status_code}"
        return f"✗ {self.title}: {self.url} ({detail})"


class LinkChecker:
    """Checks project hrefs with HEAD requests, falling back to GET."""

    def __init__(self, timeout: Optional[int] = None, session: Optional[requests.Session] = None):
        self.timeout = timeout or REQUEST_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = USER_AGENT

    @staticmethod
    def is_well_formed(url: str) -> bool:
        return url.startswith("http://") or url.startswith("https://")

    def check_url(self, url: str) -> int:
        """
        Request a URL and return its status code, retrying with GET when the
        server rejects HEAD. The GET body is never downloaded.

        Raises:
            requests.RequestException: On connection errors or timeouts.
        """
        response = self.session.head(url, timeout=self.timeout, allow_redirects=True)
        if response.status_code < 400:
            return response.status_code

        response = self.session.get(url, timeout=self.timeout, allow_redirects=True, stream=True)
        try:
            return response.status_code
        finally:
            response.close()

    def check_project(self, project: Project) -> LinkCheckResult:
        """
        Check one project's link.

        Projects without a link are reported as skipped; malformed links
        fail without a request.
        """
        if not project.href:
            return LinkCheckResult(title=project.title, url=None, ok=True, skipped=True)

        if not self.is_well_formed(project.href):
            return LinkCheckResult(
                title=project.title,
                url=project.href,
                ok=False,
                error="URL must start with http:// or https://",
            )

        try:
            status_code = self.check_url(project.href)
        except requests.RequestException as e:
            return LinkCheckResult(
                title=project.title,
                url=project.href,
                ok=False,
                error=f"{type(e).__name__}: {e}",
            )

        return LinkCheckResult(
            title=project.title,
            url=project.href,
            ok=status_code < 400,
            status_code=status_code,
        )

    def check_projects(self, projects: List[Project]) -> List[LinkCheckResult]:
        """Check every project, in display order."""
        return [self.check_project(project) for project in projects]
