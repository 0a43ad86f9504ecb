"""Agent core: creates and configures the PydanticAI `agent`.

The tool module imports this object and registers its functions via
`@agent.tool`. The model is not bound here; `build_model` creates the Azure
OpenAI model from settings and the client passes it on every run.
"""

from pydantic_ai import Agent, RunContext
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.azure import AzureProvider

from .config import AzureOpenAISettings
from .models import Deps
from .prompt import INSTRUCTIONS, render


agent = Agent(
    name="SampleAssistantAgent",
    deps_type=Deps,
    output_type=str,
)


@agent.instructions
def analyst_instructions(ctx: RunContext[Deps]) -> str:
    # Rendered per run so {{$now}} tracks the turn, not startup.
    return render(INSTRUCTIONS, ctx.deps.variables).strip()


def build_model(settings: AzureOpenAISettings) -> OpenAIChatModel:
    provider = AzureProvider(
        azure_endpoint=settings.endpoint,
        api_version=settings.api_version,
        api_key=settings.api_key,
    )
    return OpenAIChatModel(settings.chat_deployment, provider=provider)
