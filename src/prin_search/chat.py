"""Interactive chat loop.

Each line read from stdin is sent to the fixed provider/model chosen at
start-up. Provider errors are printed and the loop carries on; only
``/exit`` (any case), end of input or Ctrl-C end the session.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import TextIO

from prin_search.router import Router

logger = logging.getLogger(__name__)

EXIT_COMMAND = "/exit"
PROMPT = "You > "
ANSWER_LABEL = "Prin"

LineReader = Callable[[str], Awaitable[str]]


class ChatState(str, Enum):
    AWAITING_INPUT = "awaiting-input"
    DISPATCHING = "dispatching"
    PRINTING_RESULT = "printing-result"
    TERMINATED = "terminated"


def format_answer(label: str, text: str) -> str:
    """Render an answer block the way both CLI modes print it."""
    return f"\n=== {label} ===\n{text}\n"


async def _read_stdin(prompt: str) -> str:
    return await asyncio.to_thread(input, prompt)


class ChatSession:
    """One interactive session bound to a provider and optional model."""

    def __init__(
        self,
        router: Router,
        provider: str,
        model: str | None = None,
        read_line: LineReader | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self._router = router
        self._provider = provider
        self._model = model
        self._read_line = read_line or _read_stdin
        self._out = out or sys.stdout
        self._err = err or sys.stderr
        self.state = ChatState.AWAITING_INPUT

    async def handle_line(self, line: str) -> ChatState:
        """Process one input line and return the state it leaves the loop in."""
        text = line.strip()
        if not text:
            self.state = ChatState.AWAITING_INPUT
            return self.state
        if text.lower() == EXIT_COMMAND:
            self.state = ChatState.TERMINATED
            return self.state

        self.state = ChatState.DISPATCHING
        try:
            answer = await self._router.dispatch(self._provider, line, self._model)
        except Exception as exc:
            logger.debug("Chat request failed", exc_info=True)
            print(f"Error: {exc}", file=self._err)
        else:
            self.state = ChatState.PRINTING_RESULT
            print(format_answer(ANSWER_LABEL, answer), file=self._out)

        self.state = ChatState.AWAITING_INPUT
        return self.state

    async def run(self) -> None:
        """Print the banner, then read and answer lines until terminated."""
        header = f"\nPrin Search - interactive mode\nProvider: {self._provider}"
        if self._model:
            header += f" | Model: {self._model}"
        print(header, file=self._out)
        print(f"Type '{EXIT_COMMAND}' to quit.\n", file=self._out)

        self.state = ChatState.AWAITING_INPUT
        while self.state is not ChatState.TERMINATED:
            try:
                line = await self._read_line(PROMPT)
            except (EOFError, KeyboardInterrupt):
                self.state = ChatState.TERMINATED
                break
            await self.handle_line(line)


async def chat_loop(router: Router, provider: str, model: str | None = None) -> None:
    """Run an interactive session on stdin/stdout."""
    await ChatSession(router, provider, model).run()
