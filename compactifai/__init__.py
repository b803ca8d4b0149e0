"""CompactifAI - typed async client for the CompactifAI inference API.

A Python library for chat completions, text completions, audio
transcription and model listing against the CompactifAI API.

Usage:
    >>> from compactifai import CompactifAIClient
    >>>
    >>> client = CompactifAIClient(api_key="sk-...")
    >>> reply = await client.chat("What is the capital of France?")
    >>> print(reply)
"""

__version__ = "0.1.0"

# Public library API exports
from compactifai.core.client import CompactifAIClient, create_client
from compactifai.core.config import DEFAULT_BASE_URL, ClientConfig, CompactifAIModels
from compactifai.core.logging import setup_logging
from compactifai.core.models import (
    ChatChoice,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    CompletionChoice,
    CompletionRequest,
    CompletionResponse,
    ModelCapabilities,
    ModelInfo,
    ModelsResponse,
    Tool,
    ToolFunction,
    TranscriptionRequest,
    TranscriptionResponse,
    TranscriptionSegment,
    Usage,
)
from compactifai.core.settings import CompactifAISettings, get_settings

# Export exceptions for library users
from compactifai.core.exceptions import (
    ApiError,
    CompactifAIError,
    ConfigurationError,
    ServiceTimeoutError,
    ServiceUnreachableError,
    TransportError,
)

__all__ = [
    "__version__",
    # Client
    "CompactifAIClient",
    "create_client",
    # Configuration
    "ClientConfig",
    "CompactifAIModels",
    "CompactifAISettings",
    "DEFAULT_BASE_URL",
    "get_settings",
    "setup_logging",
    # Chat
    "ChatMessage",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatChoice",
    "Tool",
    "ToolFunction",
    "Usage",
    # Completions
    "CompletionRequest",
    "CompletionResponse",
    "CompletionChoice",
    # Transcription
    "TranscriptionRequest",
    "TranscriptionResponse",
    "TranscriptionSegment",
    # Models
    "ModelsResponse",
    "ModelInfo",
    "ModelCapabilities",
    # Exceptions
    "CompactifAIError",
    "ApiError",
    "TransportError",
    "ServiceUnreachableError",
    "ServiceTimeoutError",
    "ConfigurationError",
]
