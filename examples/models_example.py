"""Example: List the models available to your API key."""

import asyncio

from compactifai import create_client


async def main():
    client = create_client()

    models = await client.list_models()
    for model in models.data:
        size = model.parameters_number or "?"
        caps = model.capabilities
        kinds = [name for name in ("chat", "completion", "transcription") if caps and getattr(caps, name)]
        print(f"{model.id:<32} {size:>8}  {', '.join(kinds)}")


if __name__ == "__main__":
    asyncio.run(main())
