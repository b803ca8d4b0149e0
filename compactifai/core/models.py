"""Request and response shapes for the CompactifAI API.

Python field names are the wire names. Request bodies are serialized with
``exclude_none`` so that unset optional fields are left out of the JSON
instead of being sent as null. Unknown response fields are ignored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from compactifai.core.config import CompactifAIModels
from compactifai.core.fields import (
    NullableBool,
    NullableFloat,
    NullableInt,
    NullableStr,
    ParameterCount,
)


class WireModel(BaseModel):
    """Base class for everything that travels over the wire."""

    model_config = ConfigDict(extra="ignore")

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON body for this object, omitting unset fields."""
        return self.model_dump(mode="json", exclude_none=True)


# --- Chat ---


class ChatMessage(WireModel):
    """A message in a chat conversation."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    role: NullableStr = Field(default="", description="system, user or assistant")
    content: NullableStr = ""
    # Set on assistant replies that call tools; content is usually null then
    tool_calls: list[dict[str, Any]] | None = None

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> "ChatMessage":
        return cls(role="assistant", content=content)


class ToolFunction(WireModel):
    """A function that can be called as a tool."""

    name: str
    description: str | None = None
    # JSON Schema object, passed through untouched
    parameters: Any | None = None


class Tool(WireModel):
    """A tool the model may call."""

    type: str = "function"
    function: ToolFunction | None = None


class ChatCompletionRequest(WireModel):
    """Request body for chat/completions."""

    model: str = ""
    messages: list[ChatMessage] = Field(default_factory=list)
    temperature: float | None = None
    max_tokens: int | None = None
    max_completion_tokens: int | None = None
    stop: list[str] | None = None
    frequency_penalty: float | None = None
    stream: bool | None = None
    tools: list[Tool] | None = None
    tool_choice: str | None = None


class Usage(WireModel):
    """Token usage statistics."""

    prompt_tokens: NullableInt = 0
    completion_tokens: NullableInt = 0
    total_tokens: NullableInt = 0


class ChatChoice(WireModel):
    index: NullableInt = 0
    message: ChatMessage | None = None
    finish_reason: str | None = None


class ChatCompletionResponse(WireModel):
    """Response from chat/completions."""

    id: NullableStr = ""
    object: NullableStr = ""
    created: NullableInt = 0
    model: NullableStr = ""
    choices: list[ChatChoice] = Field(default_factory=list)
    usage: Usage | None = None


# --- Text completions ---


class CompletionRequest(WireModel):
    """Request body for completions."""

    model: str = ""
    prompt: str = ""
    temperature: float | None = None
    max_tokens: int | None = None
    top_p: float | None = None
    stop: list[str] | None = None


class CompletionChoice(WireModel):
    index: NullableInt = 0
    text: NullableStr = ""
    finish_reason: str | None = None


class CompletionResponse(WireModel):
    """Response from completions."""

    id: NullableStr = ""
    object: NullableStr = ""
    created: NullableInt = 0
    model: NullableStr = ""
    choices: list[CompletionChoice] = Field(default_factory=list)
    usage: Usage | None = None


# --- Audio transcription ---


class TranscriptionRequest(BaseModel):
    """Input for audio/transcriptions.

    Sent as a multipart form rather than JSON; ``file_name`` is only used to
    name the upload and pick its content type.
    """

    file_content: bytes = b""
    file_name: str = "audio.mp3"
    model: str = CompactifAIModels.WHISPER_LARGE_V3
    prompt: str | None = None
    temperature: float | None = None
    language: str | None = None
    response_format: str | None = None


class TranscriptionSegment(WireModel):
    """A timestamped span of transcribed text."""

    id: NullableInt = 0
    start: NullableFloat = 0.0
    end: NullableFloat = 0.0
    text: NullableStr = ""


class TranscriptionResponse(WireModel):
    """Response from audio/transcriptions."""

    task: NullableStr = ""
    language: NullableStr = ""
    duration: NullableFloat = 0.0
    text: NullableStr = ""
    segments: list[TranscriptionSegment] | None = None


# --- Models ---


class ModelCapabilities(WireModel):
    chat: NullableBool = False
    completion: NullableBool = False
    transcription: NullableBool = False


class ModelInfo(WireModel):
    """Metadata for a single model."""

    id: NullableStr = ""
    object: NullableStr = ""
    created: NullableInt = 0
    owned_by: NullableStr = ""
    parameters_number: ParameterCount = None
    capabilities: ModelCapabilities | None = None


class ModelsResponse(WireModel):
    """Response from the models listing."""

    object: NullableStr = ""
    data: list[ModelInfo] = Field(default_factory=list)
