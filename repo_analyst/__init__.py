"""Repository analyst package public API.

Exposes the configured `agent`, the client and loop used by the CLI, and the
settings objects. Imports the tool module so its `@agent.tool` registrations
execute at import time.
"""

from .core import agent, build_model
from .client import AgentClient, ConversationThread, PydanticAgentClient
from .config import DEFAULT_REPOSITORY, AzureOpenAISettings, GitHubSettings, Settings
from .errors import AgentError, ConfigError, GitHubError
from .loop import run_loop
from .models import Deps, UserProfile
from .prompt import TemplateVariables

# Import tool module so its @agent.tool registrations run on import
from . import tools_github  # noqa: F401
