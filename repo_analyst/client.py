"""Agent client: the capability boundary between the loop and the LLM.

The loop only knows `AgentClient.invoke`, which turns one user message plus
the turn's template variables into a lazy stream of text fragments. The
PydanticAI-backed implementation owns the conversation thread.
"""

import logging
from abc import ABC, abstractmethod
from typing import AsyncIterator, Iterable, List, Mapping, Optional

from pydantic_ai import Agent
from pydantic_ai.messages import ModelMessage
from pydantic_ai.models import Model

from .config import GitHubSettings
from .models import Deps

logger = logging.getLogger(__name__)


class AgentClient(ABC):
    @abstractmethod
    def invoke(self, message: str, variables: Mapping[str, str]) -> AsyncIterator[str]:
        """Submit one turn and yield response fragments in arrival order."""


class ConversationThread:
    """Append-only message history for one session."""

    def __init__(self, messages: Optional[Iterable[ModelMessage]] = None):
        self._messages: List[ModelMessage] = list(messages or [])

    @property
    def messages(self) -> List[ModelMessage]:
        return list(self._messages)

    def extend(self, messages: Iterable[ModelMessage]) -> None:
        self._messages.extend(messages)

    def __len__(self) -> int:
        return len(self._messages)


class PydanticAgentClient(AgentClient):
    def __init__(
        self,
        agent: Agent[Deps, str],
        model: Model,
        github: GitHubSettings,
        thread: Optional[ConversationThread] = None,
    ):
        self.agent = agent
        self.model = model
        self.github = github
        self.thread = thread if thread is not None else ConversationThread()

    async def invoke(self, message: str, variables: Mapping[str, str]) -> AsyncIterator[str]:
        deps = Deps(github=self.github, variables=dict(variables))
        logger.debug("Submitting turn (%d messages in thread)", len(self.thread))
        async with self.agent.run_stream(
            message,
            deps=deps,
            model=self.model,
            message_history=self.thread.messages,
        ) as result:
            async for fragment in result.stream_text(delta=True, debounce_by=None):
                yield fragment
            # Only reached once the stream is exhausted; an abandoned turn
            # leaves the thread untouched.
            self.thread.extend(result.new_messages())
        logger.debug("Turn complete (%d messages in thread)", len(self.thread))
