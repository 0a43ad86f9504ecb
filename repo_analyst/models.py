"""Data models shared by the GitHub plugin and the agent.

- ``UserProfile``, ``Repository``, ``Issue`` and ``IssueDetail`` are the
  shapes the GitHub plugin returns. Only the fields the analyst needs are
  kept; GitHub sends many more and they are ignored.

- ``Deps``: per-turn dependencies handed to the agent via
  ``agent.run_stream(..., deps=Deps(...))``. Tools read the GitHub settings
  as ``ctx.deps.github`` and the instructions read the template variables as
  ``ctx.deps.variables``.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .config import GitHubSettings


class UserProfile(BaseModel):
    login: str
    name: Optional[str] = None
    company: Optional[str] = None
    bio: Optional[str] = None
    html_url: Optional[str] = None
    public_repos: Optional[int] = None


class Repository(BaseModel):
    full_name: str
    description: Optional[str] = None
    html_url: Optional[str] = None
    default_branch: Optional[str] = None
    language: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    topics: List[str] = Field(default_factory=list)


class Issue(BaseModel):
    number: int
    title: str
    state: str
    html_url: Optional[str] = None
    created_at: Optional[str] = None
    labels: List[str] = Field(default_factory=list)
    assignee: Optional[str] = None


class IssueDetail(Issue):
    body: Optional[str] = None
    comments: int = 0
    author: Optional[str] = None
    closed_at: Optional[str] = None


@dataclass
class Deps:
    github: GitHubSettings
    # Template variables for this turn, keyed by placeholder name.
    variables: Dict[str, str] = field(default_factory=dict)
