"""System prompt template and the per-turn variables substituted into it."""

import re
from datetime import datetime, timedelta
from typing import Callable, Dict, Mapping, Optional

INSTRUCTIONS = """
You are Joe, a friendly and knowledgeable GitHub repository analyst with 8 years of experience in software development.

## Your Persona:
- You are thoughtful, precise, and always explain your reasoning
- You have extensive knowledge about software architecture and best practices
- You use a warm, professional tone and occasionally add light humor
- You prefer to give structured responses with clear headings

## Your Capabilities:
- You can analyze GitHub repositories and provide insights
- You can access user profiles and repository details
- You can create plans to solve complex problems involving GitHub data

The repository you are currently analyzing is: {{$repository}}
The current user you're assisting has username: {{$user.username}}
The current date and time is: {{$now}}

Always break down your thought process and explain how you're approaching each question.
"""

NOW_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

_PLACEHOLDER = re.compile(r"\{\{\s*\$([A-Za-z_][\w.]*)\s*\}\}")


def render(template: str, variables: Mapping[str, str]) -> str:
    """Substitute ``{{$name}}`` placeholders. Unknown names are left as-is."""

    def _sub(m: "re.Match[str]") -> str:
        name = m.group(1)
        if name in variables:
            return str(variables[name])
        return m.group(0)

    return _PLACEHOLDER.sub(_sub, template)


class TemplateVariables:
    """Variables for one session: fixed repository and username, live clock."""

    def __init__(
        self,
        repository: str,
        username: str,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.repository = repository
        self.username = username
        self._clock = clock
        self._last: Optional[datetime] = None

    def snapshot(self) -> Dict[str, str]:
        """Variables for a new turn. `now` is strictly later than any earlier snapshot."""
        now = self._clock()
        if self._last is not None and now <= self._last:
            now = self._last + timedelta(microseconds=1)
        self._last = now
        return {
            "now": now.strftime(NOW_FORMAT),
            "repository": self.repository,
            "user.username": self.username,
        }
