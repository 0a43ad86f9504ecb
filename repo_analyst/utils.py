"""Utility helpers for GitHub HTTP headers, clients and JSON/error handling."""

from typing import Any, Dict, Optional

import httpx

from .config import GitHubSettings
from .errors import GitHubError


def _headers(token: Optional[str]) -> Dict[str, str]:
    h = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": "2022-11-28",
        "User-Agent": "repo-analyst/1.0",
    }
    if token:
        h["Authorization"] = f"Bearer {token}"
    return h


def _client(settings: GitHubSettings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.base_url,
        headers=_headers(settings.token),
        timeout=25,
        transport=settings.transport,
    )


def _json_or_error(resp: httpx.Response) -> Any:
    if resp.status_code >= 400:
        detail_text = None
        try:
            j = resp.json()
            detail_text = j.get("message") or resp.text
        except (ValueError, AttributeError):
            detail_text = resp.text
        rl = resp.headers.get("X-RateLimit-Remaining")
        msg_lower = (detail_text or "").lower()
        if resp.status_code in (403, 429) and (rl == "0" or "rate limit" in msg_lower):
            raise GitHubError(
                429,
                "GitHub API rate limit exceeded. Provide GITHUB_TOKEN or retry later.",
            )
        raise GitHubError(resp.status_code, detail_text or "GitHub request failed")
    try:
        return resp.json()
    except ValueError:
        raise GitHubError(502, "Invalid JSON from GitHub")
