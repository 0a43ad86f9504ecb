import asyncio
import logging

import typer

from repo_analyst import (
    DEFAULT_REPOSITORY,
    ConfigError,
    GitHubError,
    PydanticAgentClient,
    Settings,
    TemplateVariables,
    agent,
    build_model,
    run_loop,
)
from repo_analyst.config import LOG_LEVEL, resolve_log_level
from repo_analyst.github import fetch_user_profile

logger = logging.getLogger("repo_analyst.cli")
cli = typer.Typer(add_completion=False)


async def _session(settings: Settings, repository: str, fail_fast: bool) -> int:
    typer.echo("Initialize plugins...")
    profile = await fetch_user_profile(settings.github)

    typer.echo("Creating kernel...")
    model = build_model(settings.azure_openai)

    typer.echo("Defining agent...")
    client = PydanticAgentClient(agent, model, settings.github)
    variables = TemplateVariables(repository, profile.login)

    typer.echo("Ready!")
    return await run_loop(client, variables, fail_fast=fail_fast)


@cli.command()
def main(
    repository: str = typer.Option(DEFAULT_REPOSITORY, help="owner/repo the analyst is looking at"),
    fail_fast: bool = typer.Option(False, "--fail-fast", help="Stop on the first failed turn instead of reporting it"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
):
    try:
        logging.basicConfig(
            level=logging.DEBUG if verbose else resolve_log_level(LOG_LEVEL),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        settings = Settings.from_env()
        turns = asyncio.run(_session(settings, repository, fail_fast))
    except ConfigError as e:
        typer.secho(f"Configuration error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except GitHubError as e:
        typer.secho(f"GitHub error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        # Ctrl-C while a turn was streaming.
        raise typer.Exit(code=130)
    logger.info("Session ended after %d turns", turns)


if __name__ == "__main__":
    cli()
