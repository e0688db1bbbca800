"""Interactive turn-taking loop."""

import logging
from collections.abc import Callable

from agentsmith.core.agent import Agent
from agentsmith.errors import AgentSmithError
from agentsmith.llm.schemas import Role

logger = logging.getLogger(__name__)

EXIT_SENTINEL = "q"


def run_interactive(
    agent: Agent,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    sentinel: str = EXIT_SENTINEL,
    prompt: str = "> ",
) -> None:
    """
    Drive the agent one line of input at a time until the sentinel is read.

    Completion errors are reported and the loop carries on. Running out of
    input is not recoverable: the EOFError raised by ``read_line``
    propagates to the caller.

    Args:
        agent: Agent holding the conversation
        read_line: Reads one line, given a prompt (defaults to input())
        write: Emits one line of output (defaults to print())
        sentinel: Input that ends the session
        prompt: Text shown before each read
    """
    while True:
        line = read_line(prompt)
        if line.strip() == sentinel:
            logger.info("Exit sentinel read, ending session")
            return

        agent.add_message(Role.USER, line)
        try:
            reply = agent.take_turn()
        except AgentSmithError as e:
            logger.warning(f"Turn failed: {e}")
            write(f"Error: {e}")
            continue

        write(reply.content)
        write(f"[tokens used: {agent.token_count}]")
