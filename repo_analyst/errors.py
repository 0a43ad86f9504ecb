"""Exceptions raised by the analyst demo."""

from typing import Optional


class AgentError(Exception):
    """Base class for errors raised by this package."""


class ConfigError(AgentError):
    """Required settings are missing or malformed."""


class GitHubError(AgentError):
    def __init__(self, status_code: int, detail: Optional[str] = None):
        self.status_code = status_code
        self.detail = detail or "GitHub request failed"
        super().__init__(f"{status_code}: {self.detail}")
