"""Basic usage of prin-search from Python."""

import asyncio

from prin_search import Router


async def main() -> None:
    """Send one prompt and print the reply with its metadata."""
    # Router reads API keys and PRIN_* env vars automatically
    router = Router()
    resp = await router.complete("gemini", "What is the capital of France?")
    print(f"Answer: {resp.content}")
    print(f"Model: {resp.model}")
    print(f"Latency: {resp.latency_ms:.0f}ms")


if __name__ == "__main__":
    asyncio.run(main())
