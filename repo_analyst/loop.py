"""Interactive read-eval-print loop between the console and an agent client."""

import asyncio
import logging
import threading
from typing import Callable, Optional

import typer

from .client import AgentClient
from .prompt import TemplateVariables

logger = logging.getLogger(__name__)

EXIT_KEYWORD = "EXIT"
PROMPT = "> "


def is_exit(line: str) -> bool:
    return line.strip().upper() == EXIT_KEYWORD


def _settle(fut: "asyncio.Future[str]", line: Optional[str], exc: Optional[BaseException]) -> None:
    if fut.done():
        return
    if exc is not None:
        fut.set_exception(exc)
    else:
        fut.set_result(line)


def read_in_background(read_line: Callable[[str], str], prompt: str) -> "asyncio.Future[str]":
    """Run `read_line` on a daemon thread and return a future for its result.

    The thread is a daemon: after the loop is cancelled (Ctrl-C under
    `asyncio.run`) it may still be blocked in `input()`, and interpreter
    shutdown must not wait on it.
    """
    loop = asyncio.get_running_loop()
    fut: "asyncio.Future[str]" = loop.create_future()

    def _worker() -> None:
        try:
            line = read_line(prompt)
        except (Exception, KeyboardInterrupt) as e:
            line, exc = None, e
        else:
            exc = None
        try:
            loop.call_soon_threadsafe(_settle, fut, line, exc)
        except RuntimeError:
            # Loop already closed; nobody is waiting for this line.
            logger.debug("Dropping console input read after loop shutdown")

    threading.Thread(target=_worker, name="console-reader", daemon=True).start()
    return fut


async def run_loop(
    client: AgentClient,
    variables: TemplateVariables,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[..., None] = typer.echo,
    fail_fast: bool = False,
) -> int:
    """Relay console lines to `client` until EXIT, end of input or Ctrl-C.

    Each non-blank line is one turn: fresh template variables are taken,
    the client's fragments are written as they arrive, and the next line is
    read only after the fragment stream is exhausted. A failing turn is
    reported and the loop carries on, unless `fail_fast` is set, in which
    case the error propagates.

    Returns the number of turns submitted.
    """
    turns = 0
    while True:
        write("")
        try:
            line = await read_in_background(read_line, PROMPT)
        except (EOFError, KeyboardInterrupt, asyncio.CancelledError):
            logger.debug("Input closed, leaving loop")
            break
        if not line or not line.strip():
            continue
        if is_exit(line):
            break

        write("")
        turns += 1
        turn_vars = variables.snapshot()
        logger.debug("Turn %d variables: %s", turns, turn_vars)
        try:
            async for fragment in client.invoke(line, turn_vars):
                write(fragment, nl=False)
        except Exception as e:
            if fail_fast:
                raise
            logger.exception("Turn %d failed", turns)
            write("")
            typer.secho(f"Agent error: {e}", fg=typer.colors.RED, err=True)
            continue
        write("")
    return turns
