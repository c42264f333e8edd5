import requests
from loguru import logger

from eventflow.config import Settings
from eventflow.core.errors import ExternalServiceError


class GitHubIssueService:
    """Creates issues on the chapter's GitHub repository."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def issues_url(self) -> str:
        s = self.settings
        return f"{s.GITHUB_API_URL.rstrip('/')}/repos/{s.GITHUB_ORG}/{s.GITHUB_REPO}/issues"

    @property
    def headers(self) -> dict:
        return {
            "Authorization": f"token {self.settings.GITHUB_API_TOKEN}",
            "User-Agent": self.settings.GITHUB_API_USER or self.settings.APP_NAME,
            "Accept": "application/vnd.github+json",
        }

    def create_issue(self, title: str, body: str) -> str:
        """Open an issue and return its html_url."""
        logger.info(f"[GitHub] Creating issue '{title}' at {self.issues_url}")
        try:
            response = requests.post(
                self.issues_url,
                headers=self.headers,
                json={"title": title, "body": body},
                timeout=self.settings.HTTP_TIMEOUT,
            )
        except requests.RequestException as e:
            raise ExternalServiceError("github", f"Issue request failed: {e}") from e

        if not response.ok:
            raise ExternalServiceError(
                "github",
                f"Issue creation returned {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            html_url = response.json().get("html_url")
        except ValueError as e:
            raise ExternalServiceError("github", "Issue response was not JSON") from e
        if not html_url:
            raise ExternalServiceError("github", "Issue response has no html_url", status_code=response.status_code)

        logger.debug(f"[GitHub] Issue created: {html_url}")
        return html_url
