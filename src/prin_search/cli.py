"""Command-line entry point.

Usage:
    prin-search -p gemini "Write a haiku"
    prin-search -p openai -m gpt-4o "Explain monads briefly"
    prin-search -i -p claude
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Coroutine, Sequence
from typing import Any

from prin_search.chat import ANSWER_LABEL, chat_loop, format_answer
from prin_search.config import PrinConfig
from prin_search.router import Router
from prin_search.types import PROVIDER_KEYS

logger = logging.getLogger(__name__)

USAGE = """Prin Search

Usage:
  prin-search -p gemini "your prompt"
  prin-search -p openai -m gpt-4o "your prompt"
  prin-search -i -p claude           (interactive)
Providers:
  openai | gemini | perplexity | deepseek | claude | grok
"""


def build_parser(config: PrinConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prin-search",
        description="Send a prompt to a hosted LLM and print the answer.",
    )
    parser.add_argument(
        "-p",
        "--provider",
        default=config.provider,
        metavar="NAME",
        help=f"Provider: {', '.join(PROVIDER_KEYS)} (default: %(default)s)",
    )
    parser.add_argument(
        "-m",
        "--model",
        default=config.model,
        help="Override the provider's default model",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Start an interactive chat instead of answering one prompt",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for diagnostics on stderr (default: PRIN_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "prompt",
        nargs="*",
        help="Prompt text; the last positional argument is sent, so quote multi-word prompts (ignored with -i)",
    )
    return parser


async def _one_shot(router: Router, provider: str, prompt: str, model: str | None) -> None:
    try:
        answer = await router.dispatch(provider, prompt, model)
    except Exception as exc:
        logger.debug("Request failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return
    print(format_answer(ANSWER_LABEL, answer))


def _run_until_interrupted(coro: Coroutine[Any, Any, None]) -> None:
    """Run *coro*, treating Ctrl-C (even mid-request) as a normal exit."""
    try:
        asyncio.run(coro)
    except KeyboardInterrupt:
        print(file=sys.stderr)


def main(argv: Sequence[str] | None = None, config: PrinConfig | None = None) -> int:
    """Parse *argv* and run one-shot or interactive mode.

    Provider errors are reported on stderr and still exit 0.
    """
    config = config or PrinConfig()
    args = build_parser(config).parse_args(argv)

    if args.log_level:
        config = config.model_copy(update={"log_level": args.log_level})

    if args.interactive:
        router = Router(config=config)
        _run_until_interrupted(chat_loop(router, args.provider, args.model))
        return 0

    if not args.prompt:
        print(USAGE)
        return 0

    router = Router(config=config)
    _run_until_interrupted(_one_shot(router, args.provider, args.prompt[-1], args.model))
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
