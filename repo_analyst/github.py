"""GitHub plugin: read-only REST lookups used at startup and as agent tools."""

import logging
from typing import Any, Dict, List, Optional

from .config import GitHubSettings
from .models import Issue, IssueDetail, Repository, UserProfile
from .utils import _client, _json_or_error

logger = logging.getLogger(__name__)


def _issue_fields(it: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "number": it.get("number"),
        "title": it.get("title") or "",
        "state": it.get("state") or "",
        "html_url": it.get("html_url"),
        "created_at": it.get("created_at"),
        "labels": [lbl.get("name") for lbl in it.get("labels") or [] if lbl.get("name")],
        "assignee": (it.get("assignee") or {}).get("login"),
    }


async def fetch_user_profile(settings: GitHubSettings) -> UserProfile:
    """Return the profile of the user that owns the configured token."""
    async with _client(settings) as client:
        r = await client.get("/user")
        js = _json_or_error(r)
    profile = UserProfile.model_validate(js)
    logger.debug("Fetched GitHub profile for %s", profile.login)
    return profile


async def fetch_repository(settings: GitHubSettings, organization: str, repo: str) -> Repository:
    async with _client(settings) as client:
        r = await client.get(f"/repos/{organization}/{repo}")
        js = _json_or_error(r)
    return Repository.model_validate(js)


async def fetch_issues(
    settings: GitHubSettings,
    organization: str,
    repo: str,
    *,
    max_results: int = 10,
    state: str = "open",
    label: Optional[str] = None,
    assignee: Optional[str] = None,
) -> List[Issue]:
    """List issues, newest first. Pull requests share the endpoint and are dropped."""
    limit = max(0, min(max_results, 100))
    if limit == 0:
        return []
    params: Dict[str, Any] = {"state": state, "per_page": limit}
    if label:
        params["labels"] = label
    if assignee:
        params["assignee"] = assignee
    async with _client(settings) as client:
        r = await client.get(f"/repos/{organization}/{repo}/issues", params=params)
        items = _json_or_error(r)
    out: List[Issue] = []
    for it in items:
        if "pull_request" in it:
            continue
        out.append(Issue.model_validate(_issue_fields(it)))
    return out[:limit]


async def fetch_issue_detail(
    settings: GitHubSettings, organization: str, repo: str, issue_id: int
) -> IssueDetail:
    async with _client(settings) as client:
        r = await client.get(f"/repos/{organization}/{repo}/issues/{issue_id}")
        it = _json_or_error(r)
    fields = _issue_fields(it)
    fields.update(
        body=it.get("body"),
        comments=it.get("comments") or 0,
        author=(it.get("user") or {}).get("login"),
        closed_at=it.get("closed_at"),
    )
    return IssueDetail.model_validate(fields)
