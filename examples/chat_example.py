"""Example: Send chat completion requests using the CompactifAI client."""

import asyncio

from compactifai import (
    ChatCompletionRequest,
    ChatMessage,
    CompactifAIModels,
    create_client,
    get_settings,
    setup_logging,
)


async def main():
    """Send a shorthand chat message, then a full chat completion request."""
    setup_logging(get_settings().get_log_level())

    # Reads COMPACTIFAI_API_KEY (and friends) from the environment or .env
    client = create_client()

    print("Sending chat message...")
    reply = await client.chat(
        "What is the capital of France?",
        system_prompt="You are a helpful assistant.",
    )
    print(f"\nAssistant: {reply}")

    request = ChatCompletionRequest(
        model=CompactifAIModels.LLAMA_3_3_70B_SLIM,
        messages=[
            ChatMessage.system("You are a helpful assistant."),
            ChatMessage.user("Name three rivers in Europe."),
        ],
        temperature=0.7,
        max_tokens=100,
    )
    response = await client.create_chat_completion(request)

    if response.choices and response.choices[0].message:
        print(f"\nAssistant: {response.choices[0].message.content}")

    # Print token usage if available
    if response.usage:
        print(f"\nTokens used: {response.usage.total_tokens}")


if __name__ == "__main__":
    asyncio.run(main())
