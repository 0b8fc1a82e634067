"""Asks every provider that has an API key the same question.

Set any of OPENAI_API_KEY, GOOGLE_API_KEY, ANTHROPIC_API_KEY, PPLX_API_KEY,
DEEPSEEK_API_KEY, XAI_API_KEY (or put them in .env). Providers without a
key report "Missing <ENV_VAR>" and the loop moves on.
"""

import asyncio

from prin_search import MissingCredentialError, Router, list_providers


async def main() -> None:
    router = Router()
    for provider in list_providers():
        try:
            text = await router.dispatch(provider, "Say hello in one short sentence.")
        except MissingCredentialError as exc:
            print(f"{provider:>10}: skipped ({exc})")
            continue
        print(f"{provider:>10}: {text}")


if __name__ == "__main__":
    asyncio.run(main())
