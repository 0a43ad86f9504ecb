import json
from datetime import datetime, timedelta
from typing import Callable, Dict, List

import httpx
import pytest

from repo_analyst.client import AgentClient
from repo_analyst.config import GitHubSettings


PROFILE = {
    "login": "octocat",
    "name": "The Octocat",
    "company": "@github",
    "bio": None,
    "html_url": "https://github.com/octocat",
    "public_repos": 8,
}


def github_settings(handler: Callable[[httpx.Request], httpx.Response]) -> GitHubSettings:
    return GitHubSettings(token="t0ken", transport=httpx.MockTransport(handler))


def json_response(status: int, body, headers: Dict[str, str] = None) -> httpx.Response:
    return httpx.Response(
        status,
        content=json.dumps(body).encode(),
        headers={"Content-Type": "application/json", **(headers or {})},
    )


class ScriptedClient(AgentClient):
    """Agent client that replays canned fragments and records every call."""

    def __init__(self, replies: List[List[str]], events: List[str] = None):
        self.replies = list(replies)
        self.calls: List[tuple] = []
        self.events = events if events is not None else []

    async def invoke(self, message, variables):
        self.calls.append((message, dict(variables)))
        reply = self.replies.pop(0)
        for fragment in reply:
            if isinstance(fragment, Exception):
                raise fragment
            self.events.append(f"fragment:{fragment}")
            yield fragment


class ScriptedInput:
    """Stand-in for `input`: returns queued lines (raising queued exceptions), then EOFError."""

    def __init__(self, lines: List[str], events: List[str] = None):
        self.lines = list(lines)
        self.prompts: List[str] = []
        self.events = events if events is not None else []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        line = self.lines.pop(0)
        if isinstance(line, BaseException):
            raise line
        self.events.append(f"read:{line}")
        return line


class TickingClock:
    """Clock that advances one second on every call."""

    def __init__(self, start: datetime = datetime(2025, 3, 14, 9, 26, 53)):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture
def output():
    chunks: List[str] = []

    def write(message: str = "", nl: bool = True):
        chunks.append(message + ("\n" if nl else ""))

    write.chunks = chunks
    return write
