"""High-level client for the CompactifAI API."""

import asyncio
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from compactifai.core.config import ClientConfig
from compactifai.core.exceptions import ApiError, ConfigurationError
from compactifai.core.logging import bind_request_id
from compactifai.core.models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    CompletionRequest,
    CompletionResponse,
    ModelInfo,
    ModelsResponse,
    TranscriptionRequest,
    TranscriptionResponse,
)
from compactifai.core.requests import (
    PreparedRequest,
    build_chat_request,
    build_completion_request,
    build_get_model_request,
    build_list_models_request,
    build_transcription_request,
)
from compactifai.core.responses import resolve_response
from compactifai.core.settings import CompactifAISettings, get_settings
from compactifai.core.transport import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class CompactifAIClient:
    """Client for the CompactifAI API.

    Every operation is a coroutine doing a single round trip. The client
    holds no state besides its configuration, so one instance can serve
    many concurrent tasks. Cancel the awaiting task to abort a call.

    Args:
        config: Client configuration; defaults to ``ClientConfig()``
        api_key: Overrides ``config.api_key``
        base_url: Overrides ``config.base_url``
        transport: Optional httpx transport used for every request

    Raises:
        ConfigurationError: If no API key is configured
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        config = config or ClientConfig()
        overrides: dict[str, Any] = {}
        if api_key is not None:
            overrides["api_key"] = api_key
        if base_url is not None:
            overrides["base_url"] = base_url
        if overrides:
            config = replace(config, **overrides)

        if not config.api_key:
            raise ConfigurationError(
                "No API key configured. Pass api_key or set COMPACTIFAI_API_KEY."
            )

        self._config = config
        self._transport = Transport.from_config(config, transport=transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    async def _execute(self, prepared: PreparedRequest, model_type: type[T]) -> T:
        with bind_request_id():
            logger.debug("%s %s", prepared.method, prepared.path)
            response = await self._transport.send(prepared)
            return resolve_response(response, model_type)

    def _no_choices(self, response_id: str) -> str:
        if self._config.strict_choices:
            raise ApiError.decode_failed("Response contained no choices")
        logger.warning("Response %s contained no choices", response_id or "<no id>")
        return ""

    # --- Chat completions ---

    async def create_chat_completion(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """Create a chat completion.

        An empty ``request.model`` is replaced by the configured default model.

        Raises:
            ApiError: If the API returns an error or an undecodable body
            TransportError: If the API could not be reached
        """
        prepared = build_chat_request(request, self._config)
        return await self._execute(prepared, ChatCompletionResponse)

    async def chat(
        self,
        message: str,
        model: str | None = None,
        system_prompt: str | None = None,
    ) -> str:
        """Send a single user message and return the reply text.

        Returns an empty string when the API returns no choices, unless the
        client was configured with ``strict_choices``.
        """
        messages: list[ChatMessage] = []
        if system_prompt:
            messages.append(ChatMessage.system(system_prompt))
        messages.append(ChatMessage.user(message))

        request = ChatCompletionRequest(
            model=model or self._config.default_model,
            messages=messages,
        )
        response = await self.create_chat_completion(request)

        if not response.choices:
            return self._no_choices(response.id)
        first = response.choices[0]
        return first.message.content if first.message else ""

    # --- Text completions ---

    async def create_completion(self, request: CompletionRequest) -> CompletionResponse:
        """Create a text completion.

        An empty ``request.model`` is replaced by the configured default model.
        """
        prepared = build_completion_request(request, self._config)
        return await self._execute(prepared, CompletionResponse)

    async def complete(
        self,
        prompt: str,
        model: str | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Complete a prompt and return the generated text."""
        request = CompletionRequest(
            model=model or self._config.default_model,
            prompt=prompt,
            max_tokens=max_tokens,
        )
        response = await self.create_completion(request)

        if not response.choices:
            return self._no_choices(response.id)
        return response.choices[0].text

    # --- Audio transcription ---

    async def transcribe(self, request: TranscriptionRequest) -> TranscriptionResponse:
        """Transcribe audio uploaded as a multipart form."""
        prepared = build_transcription_request(request)
        logger.debug(
            "Uploading %s (%d bytes) for transcription", request.file_name, len(request.file_content)
        )
        return await self._execute(prepared, TranscriptionResponse)

    async def transcribe_file(self, file_path: str | Path, language: str | None = None) -> str:
        """Transcribe a local audio file and return the text.

        Raises:
            OSError: If the file cannot be read
        """
        path = Path(file_path)
        file_content = await asyncio.to_thread(path.read_bytes)

        request = TranscriptionRequest(
            file_content=file_content,
            file_name=path.name,
            language=language,
        )
        response = await self.transcribe(request)
        return response.text

    # --- Models ---

    async def list_models(self) -> ModelsResponse:
        """List the models available to this API key."""
        return await self._execute(build_list_models_request(), ModelsResponse)

    async def get_model(self, model_id: str) -> ModelInfo:
        """Fetch metadata for a single model."""
        return await self._execute(build_get_model_request(model_id), ModelInfo)


def create_client(
    api_key: str | None = None,
    *,
    settings: CompactifAISettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    **overrides: Any,
) -> CompactifAIClient:
    """Build a client from settings.

    Settings come from the environment (``COMPACTIFAI_*`` and ``.env``)
    unless given. An explicit ``api_key`` and any ``ClientConfig`` field
    passed as keyword override the settings.

    Raises:
        ValueError: If the environment settings are invalid
        ConfigurationError: If no API key ends up configured
    """
    settings = settings or get_settings()
    config = settings.to_config()
    if api_key is not None:
        overrides["api_key"] = api_key
    if overrides:
        config = replace(config, **overrides)
    return CompactifAIClient(config, transport=transport)
