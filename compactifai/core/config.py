"""Simple configuration for core library usage."""

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.compactif.ai/v1"


class CompactifAIModels:
    """Model identifiers available in the CompactifAI API."""

    # Flagship model for complex reasoning tasks
    DEEPSEEK_R1_SLIM = "cai-deepseek-r1-0528-slim"
    # Long context tasks
    LLAMA_4_SCOUT_SLIM = "cai-llama-4-scout-slim"
    LLAMA_4_SCOUT = "llama-4-scout"
    LLAMA_3_3_70B_SLIM = "cai-llama-3-3-70b-slim"
    LLAMA_3_3_70B = "llama-3-3-70b"
    # Simple general purpose tasks requiring low latency
    LLAMA_3_1_8B_SLIM = "cai-llama-3-1-8b-slim"
    LLAMA_3_1_8B_SLIM_R = "cai-llama-3-1-8b-slim-r"
    LLAMA_3_1_8B = "llama-3-1-8b"
    MISTRAL_SMALL_3_1_SLIM = "cai-mistral-small-3-1-slim"
    MISTRAL_SMALL_3_1 = "mistral-small-3-1"
    GPT_OSS_20B = "gpt-oss-20b"
    GPT_OSS_120B = "gpt-oss-120b"
    # Speech-to-text, multilingual
    WHISPER_LARGE_V3 = "whisper-large-v3"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for the CompactifAI client.

    Fixed at construction; the client never mutates it.

    Args:
        api_key: Bearer credential sent with every request
        base_url: Base URL of the API, with or without a trailing slash
        default_model: Model used when a request leaves its model empty
        timeout_s: Total timeout for API requests in seconds
        connect_timeout_s: Connection timeout for API requests in seconds
        strict_choices: Raise instead of returning "" when a shorthand call
            gets a response without choices
    """

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    default_model: str = CompactifAIModels.LLAMA_3_1_8B_SLIM
    timeout_s: float = 120.0
    connect_timeout_s: float = 10.0
    strict_choices: bool = False
