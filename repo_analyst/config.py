"""Configuration and environment defaults for the analyst demo.

Loads environment variables (.env via python-dotenv) and exposes the settings
objects handed to the GitHub plugin and the Azure OpenAI model at startup.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

import httpx
from dotenv import load_dotenv

from .errors import ConfigError

load_dotenv()

GITHUB_API = "https://api.github.com"
DEFAULT_REPOSITORY = "microsoft/semantic-kernel"
DEFAULT_API_VERSION = "2024-10-21"
LOG_LEVEL = os.getenv("AGENT_LOG_LEVEL", "WARNING")


@dataclass
class AzureOpenAISettings:
    endpoint: str
    api_key: str
    # Name of the chat model deployment, not the underlying model.
    chat_deployment: str
    api_version: str = DEFAULT_API_VERSION


@dataclass
class GitHubSettings:
    token: Optional[str] = None
    base_url: str = GITHUB_API
    # Only set by tests; None means a real network transport.
    transport: Optional[httpx.AsyncBaseTransport] = field(default=None, repr=False)


@dataclass
class Settings:
    azure_openai: AzureOpenAISettings
    github: GitHubSettings

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        required: Dict[str, str] = {
            "endpoint": "AZURE_OPENAI_ENDPOINT",
            "api_key": "AZURE_OPENAI_API_KEY",
            "chat_deployment": "AZURE_OPENAI_CHAT_DEPLOYMENT",
        }
        values: Dict[str, str] = {}
        missing: List[str] = []
        for attr, name in required.items():
            value = (env.get(name) or "").strip()
            if not value:
                missing.append(name)
            values[attr] = value
        if missing:
            raise ConfigError(f"Missing required settings: {', '.join(missing)}")

        azure = AzureOpenAISettings(
            api_version=env.get("AZURE_OPENAI_API_VERSION") or DEFAULT_API_VERSION,
            **values,
        )
        github = GitHubSettings(
            token=env.get("GITHUB_TOKEN") or None,
            base_url=(env.get("GITHUB_API_URL") or GITHUB_API).rstrip("/"),
        )
        return cls(azure_openai=azure, github=github)


def resolve_log_level(name: str) -> int:
    """Map a level name such as ``"info"`` to its logging constant."""
    levels = logging.getLevelNamesMapping()
    key = (name or "").strip().upper()
    if key not in levels:
        raise ConfigError(f"Unknown AGENT_LOG_LEVEL {name!r}; expected one of {', '.join(sorted(levels))}")
    return levels[key]
