"""GitHub tools exposed to the model: profile, repository and issue lookups."""

from typing import Any, Dict, Optional

from pydantic_ai import RunContext

from .core import agent
from .errors import GitHubError
from .models import Deps
from . import github


@agent.tool
async def get_user_profile(ctx: RunContext[Deps]) -> Dict[str, Any]:
    """Get the GitHub profile of the current user (login, name, company, bio)."""
    try:
        profile = await github.fetch_user_profile(ctx.deps.github)
    except GitHubError as e:
        return {"error": str(e)}
    return profile.model_dump()


@agent.tool
async def get_repository(
    ctx: RunContext[Deps], *, organization: str, repo: str
) -> Dict[str, Any]:
    """Get details of a repository: description, language, stars, forks, open issues."""
    try:
        repository = await github.fetch_repository(ctx.deps.github, organization, repo)
    except GitHubError as e:
        return {"error": str(e)}
    return repository.model_dump()


@agent.tool
async def get_issues(
    ctx: RunContext[Deps],
    *,
    organization: str,
    repo: str,
    max_results: int = 10,
    state: str = "open",
    label: Optional[str] = None,
    assignee: Optional[str] = None,
) -> Dict[str, Any]:
    """List issues of a repository. `state` is one of open, closed, all."""
    try:
        issues = await github.fetch_issues(
            ctx.deps.github,
            organization,
            repo,
            max_results=max_results,
            state=state,
            label=label,
            assignee=assignee,
        )
    except GitHubError as e:
        return {"error": str(e)}
    return {"issues": [i.model_dump() for i in issues]}


@agent.tool
async def get_issue_detail(
    ctx: RunContext[Deps], *, organization: str, repo: str, issue_id: int
) -> Dict[str, Any]:
    """Get the full text and metadata of a single issue."""
    try:
        issue = await github.fetch_issue_detail(ctx.deps.github, organization, repo, issue_id)
    except GitHubError as e:
        return {"error": str(e)}
    return issue.model_dump()
