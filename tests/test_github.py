import httpx
import pytest

from repo_analyst.errors import GitHubError
from repo_analyst.github import (
    fetch_issue_detail,
    fetch_issues,
    fetch_repository,
    fetch_user_profile,
)

from conftest import PROFILE, github_settings, json_response


@pytest.mark.asyncio
async def test_fetch_user_profile_sends_token():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["auth"] = request.headers.get("Authorization")
        seen["accept"] = request.headers.get("Accept")
        return json_response(200, dict(PROFILE, id=583231, followers=1000))

    profile = await fetch_user_profile(github_settings(handler))
    assert profile.login == "octocat"
    assert profile.public_repos == 8
    assert seen == {"path": "/user", "auth": "Bearer t0ken", "accept": "application/vnd.github+json"}


@pytest.mark.asyncio
async def test_fetch_user_profile_unauthorized():
    def handler(request):
        return json_response(401, {"message": "Bad credentials"})

    with pytest.raises(GitHubError) as exc:
        await fetch_user_profile(github_settings(handler))
    assert exc.value.status_code == 401
    assert exc.value.detail == "Bad credentials"


@pytest.mark.asyncio
async def test_rate_limit_is_reported_as_429():
    def handler(request):
        return json_response(403, {"message": "API rate limit exceeded"}, {"X-RateLimit-Remaining": "0"})

    with pytest.raises(GitHubError) as exc:
        await fetch_user_profile(github_settings(handler))
    assert exc.value.status_code == 429
    assert "GITHUB_TOKEN" in exc.value.detail


@pytest.mark.asyncio
async def test_invalid_json_is_502():
    def handler(request):
        return httpx.Response(200, content=b"<html>", headers={"Content-Type": "text/html"})

    with pytest.raises(GitHubError) as exc:
        await fetch_user_profile(github_settings(handler))
    assert exc.value.status_code == 502


@pytest.mark.asyncio
async def test_fetch_repository():
    def handler(request):
        assert request.url.path == "/repos/microsoft/semantic-kernel"
        return json_response(
            200,
            {
                "full_name": "microsoft/semantic-kernel",
                "description": "Integrate cutting-edge LLM technology",
                "language": "C#",
                "stargazers_count": 25000,
                "forks_count": 4000,
                "open_issues_count": 500,
                "default_branch": "main",
            },
        )

    repo = await fetch_repository(github_settings(handler), "microsoft", "semantic-kernel")
    assert repo.full_name == "microsoft/semantic-kernel"
    assert repo.stargazers_count == 25000
    assert repo.topics == []


@pytest.mark.asyncio
async def test_fetch_issues_skips_pull_requests_and_passes_filters():
    seen = {}

    def handler(request):
        seen.update(request.url.params)
        return json_response(
            200,
            [
                {
                    "number": 2,
                    "title": "Crash on startup",
                    "state": "open",
                    "labels": [{"name": "bug"}],
                    "assignee": {"login": "octocat"},
                },
                {"number": 3, "title": "Fix crash", "state": "open", "pull_request": {"url": "x"}},
                {"number": 1, "title": "Docs", "state": "open", "labels": [], "assignee": None},
            ],
        )

    issues = await fetch_issues(
        github_settings(handler), "microsoft", "semantic-kernel", max_results=5, label="bug", assignee="octocat"
    )
    assert [i.number for i in issues] == [2, 1]
    assert issues[0].labels == ["bug"]
    assert issues[0].assignee == "octocat"
    assert issues[1].assignee is None
    assert seen == {"state": "open", "per_page": "5", "labels": "bug", "assignee": "octocat"}


@pytest.mark.asyncio
async def test_fetch_issue_detail():
    def handler(request):
        assert request.url.path == "/repos/microsoft/semantic-kernel/issues/42"
        return json_response(
            200,
            {
                "number": 42,
                "title": "Question",
                "state": "closed",
                "body": "How do I stream?",
                "comments": 3,
                "user": {"login": "hubot"},
                "closed_at": "2025-01-02T00:00:00Z",
                "labels": [{"name": "question"}],
            },
        )

    issue = await fetch_issue_detail(github_settings(handler), "microsoft", "semantic-kernel", 42)
    assert issue.author == "hubot"
    assert issue.comments == 3
    assert issue.labels == ["question"]
    assert issue.closed_at == "2025-01-02T00:00:00Z"


@pytest.mark.asyncio
@pytest.mark.parametrize("max_results", [0, -3])
async def test_fetch_issues_non_positive_limit_returns_nothing(max_results):
    def handler(request):
        raise AssertionError("no request expected")

    issues = await fetch_issues(github_settings(handler), "microsoft", "semantic-kernel", max_results=max_results)
    assert issues == []


@pytest.mark.asyncio
async def test_fetch_issues_limit_caps_page_and_result():
    seen = {}

    def handler(request):
        seen.update(request.url.params)
        return json_response(
            200,
            [{"number": n, "title": f"issue {n}", "state": "open"} for n in range(150, 0, -1)],
        )

    issues = await fetch_issues(github_settings(handler), "microsoft", "semantic-kernel", max_results=500)
    assert seen["per_page"] == "100"
    assert len(issues) == 100
    assert issues[0].number == 150
