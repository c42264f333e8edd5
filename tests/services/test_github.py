import pytest
import requests
from unittest.mock import MagicMock, patch

from eventflow.core.errors import ExternalServiceError
from eventflow.services.github import GitHubIssueService


def _response(status_code=201, payload=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = payload if payload is not None else {}
    response.text = str(payload)
    return response


def test_create_issue_posts_title_and_body(settings):
    service = GitHubIssueService(settings)
    with patch("eventflow.services.github.requests.post") as mock_post:
        mock_post.return_value = _response(201, {"html_url": "https://github.com/nodeschool/lahore/issues/7"})

        url = service.create_issue("Mentor Registration: X at Y", "body text")

    assert url == "https://github.com/nodeschool/lahore/issues/7"
    args, kwargs = mock_post.call_args
    assert args[0] == "https://api.github.com/repos/nodeschool/lahore/issues"
    assert kwargs["json"] == {"title": "Mentor Registration: X at Y", "body": "body text"}
    assert kwargs["headers"]["Authorization"] == "token test-token"
    assert kwargs["headers"]["User-Agent"] == "test-user"
    assert kwargs["timeout"] == settings.HTTP_TIMEOUT


def test_create_issue_http_error(settings):
    service = GitHubIssueService(settings)
    with patch("eventflow.services.github.requests.post", return_value=_response(401, {"message": "Bad credentials"})):
        with pytest.raises(ExternalServiceError) as exc_info:
            service.create_issue("t", "b")
    assert exc_info.value.status_code == 401
    assert exc_info.value.service == "github"


def test_create_issue_transport_error(settings):
    service = GitHubIssueService(settings)
    with patch("eventflow.services.github.requests.post", side_effect=requests.ConnectionError("offline")):
        with pytest.raises(ExternalServiceError, match="offline"):
            service.create_issue("t", "b")


def test_create_issue_without_html_url(settings):
    service = GitHubIssueService(settings)
    with patch("eventflow.services.github.requests.post", return_value=_response(201, {"id": 1})):
        with pytest.raises(ExternalServiceError, match="html_url"):
            service.create_issue("t", "b")
