"""agentsmith CLI entrypoint."""

import argparse
import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any, NoReturn

from agentsmith import __version__
from agentsmith.core.agent import Agent
from agentsmith.core.config import AgentSmithConfig, load_config
from agentsmith.errors import CompletionError, ConfigurationError
from agentsmith.llm.endpoints import resolve_endpoint
from agentsmith.llm.factory import create_llm_client
from agentsmith.llm.schemas import Message, Role
from agentsmith.repl import run_interactive
from agentsmith.utils import greeting, setup_logging

EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130


def print_output(data: Any, as_json: bool) -> None:
    """Print output as JSON or human-readable format."""
    if as_json:
        json.dump(data, sys.stdout, indent=2, default=str)
        print()
    else:
        if isinstance(data, dict):
            for key, value in data.items():
                print(f"{key}: {value}")
        else:
            print(data)


def _seed(role: Role) -> Callable[[str], Message]:
    def parse(text: str) -> Message:
        return Message(role=role, content=text)

    parse.__name__ = f"{role.value} message"
    return parse


def build_agent(args: argparse.Namespace, config: AgentSmithConfig) -> Agent:
    """Build the Agent from CLI flags layered over the loaded config.

    Raises:
        ConfigurationError: If the API key is missing or the model prefix is unknown
    """
    model = args.model or config.llm.model
    if config.llm.provider.lower() != "mock":
        # Fail before the first turn rather than on it
        resolve_endpoint(model)

    return Agent(
        api_key=args.api_key or config.llm.api_key,
        model=model,
        prompt=args.prompt or config.agent.prompt,
        messages=args.seeds or (),
        client=create_llm_client(config.llm),
    )


def _config_error(error: ConfigurationError) -> NoReturn:
    print(f"✗ Configuration error: {error}", file=sys.stderr)
    sys.exit(EXIT_CONFIG_ERROR)


def cmd_version(args: argparse.Namespace, config: AgentSmithConfig) -> None:
    """Print the agentsmith version."""
    print(__version__)


def cmd_chat(args: argparse.Namespace, config: AgentSmithConfig) -> None:
    """Run the interactive chat loop until the exit sentinel is entered."""
    try:
        agent = build_agent(args, config)
    except ConfigurationError as e:
        _config_error(e)

    sentinel = config.agent.sentinel
    print(greeting())
    print(f"Chatting with {agent.model}. Type '{sentinel}' to quit.")

    try:
        run_interactive(agent, sentinel=sentinel)
    except EOFError:
        print("\nInput stream closed, exiting.", file=sys.stderr)
        print(f"Total tokens used: {agent.token_count}")
        sys.exit(EXIT_FAILURE)
    except KeyboardInterrupt:
        print("\nInterrupted, exiting.", file=sys.stderr)
        print(f"Total tokens used: {agent.token_count}")
        sys.exit(EXIT_INTERRUPTED)

    print(f"Total tokens used: {agent.token_count}")


def cmd_ask(args: argparse.Namespace, config: AgentSmithConfig) -> None:
    """Send one message, print the reply and exit."""
    try:
        agent = build_agent(args, config)
    except ConfigurationError as e:
        _config_error(e)

    if args.text:
        agent.add_message(Role.USER, args.text)

    try:
        reply = agent.take_turn()
    except CompletionError as e:
        if args.json:
            print_output({"status": "error", "error": str(e)}, as_json=True)
        else:
            print(f"✗ Request failed: {e}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)

    if args.json:
        print_output(
            {
                "model": agent.model,
                "reply": reply.content,
                "token_count": agent.token_count,
            },
            as_json=True,
        )
    else:
        print(reply.content)
        print(f"Total tokens used: {agent.token_count}")


def cmd_smoke_test_model(args: argparse.Namespace, config: AgentSmithConfig) -> None:
    """Test provider connectivity with one small request."""
    model = args.model or config.llm.model
    print(f"Testing LLM provider: {config.llm.provider}")
    print(f"Model: {model}")

    try:
        agent = build_agent(args, config)
    except ConfigurationError as e:
        if args.json:
            print_output({"status": "error", "error": str(e)}, as_json=True)
        _config_error(e)

    print("✓ Agent created successfully")

    agent.set_prompt("You are a helpful assistant. Answer in one short sentence.")
    agent.add_message(Role.USER, "Say hello to agentsmith.")

    try:
        reply = agent.take_turn()
    except CompletionError as e:
        print(f"✗ LLM request failed: {e}")
        print()
        print("Troubleshooting tips:")
        print("  1. Check your API key (--api-key or API_KEY)")
        print("  2. Verify your network connection")
        print("  3. Ensure the model name is correct")
        print(f"     - Current model: {model}")
        if args.json:
            print_output({"status": "error", "error": str(e)}, as_json=True)
        sys.exit(EXIT_FAILURE)

    print("✓ LLM request successful")
    print(f"  Response: {reply.content}")

    if args.json:
        print_output(
            {
                "status": "success",
                "provider": config.llm.provider,
                "model": model,
                "response": reply.content,
                "token_count": agent.token_count,
            },
            as_json=True,
        )
    else:
        print("✓ Smoke test PASSED")
        print(f"  Provider '{config.llm.provider}' is working correctly")


def _add_agent_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--api-key", help="API key for the completion service (default: $API_KEY)")
    parser.add_argument("--model", help="Model identifier (default: from config, mistral-medium)")
    parser.add_argument("--prompt", help="System prompt / persona for the conversation")
    for role in (Role.SYSTEM, Role.USER, Role.ASSISTANT):
        parser.add_argument(
            f"--{role.value}",
            action="append",
            dest="seeds",
            type=_seed(role),
            metavar="TEXT",
            help=f"Seed a {role.value} message (repeatable, order preserved)",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agentsmith",
        description="agentsmith - chat with Mistral and OpenAI models from the terminal",
    )
    parser.add_argument("--config", type=Path, help="Path to a TOML config file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: from config)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    version_parser = subparsers.add_parser("version", help="Print the agentsmith version")
    version_parser.set_defaults(func=cmd_version)

    chat_parser = subparsers.add_parser("chat", help="Start an interactive chat session")
    _add_agent_arguments(chat_parser)
    chat_parser.set_defaults(func=cmd_chat)

    ask_parser = subparsers.add_parser("ask", help="Send a single message and print the reply")
    ask_parser.add_argument("text", nargs="?", help="User message to send")
    _add_agent_arguments(ask_parser)
    ask_parser.add_argument("--json", action="store_true", help="Output as JSON")
    ask_parser.set_defaults(func=cmd_ask)

    smoke_test_parser = subparsers.add_parser(
        "smoke-test-model",
        help="Test LLM provider connectivity with a simple request",
    )
    _add_agent_arguments(smoke_test_parser)
    smoke_test_parser.add_argument("--json", action="store_true", help="Output as JSON")
    smoke_test_parser.set_defaults(func=cmd_smoke_test_model)

    return parser


def main(argv: list[str] | None = None) -> NoReturn:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        sys.exit(EXIT_CONFIG_ERROR)

    setup_logging(
        level=args.log_level or config.logging.level,
        json_format=config.logging.format == "json",
    )

    args.func(args, config)
    sys.exit(0)


if __name__ == "__main__":
    main()
